import pytest


def write_dataset(folder, dataset_id, capacity, pallets, declared=None):
    """Write TruckAndPallets_<id>.csv and Pallets_<id>.csv into `folder`."""
    count = len(pallets) if declared is None else declared
    (folder / f"TruckAndPallets_{dataset_id}.csv").write_text(
        f"Capacity,Pallets\n{capacity},{count}\n"
    )
    lines = ["Pallet,Weight,Profit"] + [f"{i},{w},{p}" for i, w, p in pallets]
    (folder / f"Pallets_{dataset_id}.csv").write_text("\n".join(lines) + "\n")


@pytest.fixture
def data_dir(tmp_path):
    write_dataset(tmp_path, "01", 10, [(1, 5, 10), (2, 4, 40), (3, 6, 30)])
    write_dataset(tmp_path, "12", 0, [(1, 1, 1)])
    return tmp_path
