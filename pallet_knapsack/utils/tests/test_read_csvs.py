# CSV dataset readers

import csv
import logging

import pytest
from pallet_knapsack.business_objects import Item, KnapsackSpec, SchemaError
from pallet_knapsack.utils.read_csvs import load_dataset, read_pallets_csv, read_truck_csv


@pytest.fixture
def truck_file(tmp_path):
    path = tmp_path / "TruckAndPallets_01.csv"
    path.write_text("Capacity,Pallets\n90,3\n")
    return path


@pytest.fixture
def pallets_file(tmp_path):
    path = tmp_path / "Pallets_01.csv"
    path.write_text("Pallet,Weight,Profit\n1,10,18\n2, 15 ,26\n\n3,20,30\n")
    return path


class TestTruck(object):

    def test_read(self, truck_file):
        assert read_truck_csv(str(truck_file)) == KnapsackSpec(capacity=90, item_count=3)

    def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaError, match="failed to read"):
            read_truck_csv(str(tmp_path / "nope.csv"))

    def test_empty_file(self, tmp_path):
        path = tmp_path / "t.csv"
        path.write_text("")
        with pytest.raises(SchemaError, match="header"):
            read_truck_csv(str(path))

    def test_header_only(self, tmp_path):
        path = tmp_path / "t.csv"
        path.write_text("Capacity,Pallets\n")
        with pytest.raises(SchemaError, match="data line"):
            read_truck_csv(str(path))

    def test_not_an_integer(self, tmp_path):
        path = tmp_path / "t.csv"
        path.write_text("Capacity,Pallets\nlots,3\n")
        with pytest.raises(SchemaError, match="capacity"):
            read_truck_csv(str(path))

    def test_negative_capacity(self, tmp_path):
        path = tmp_path / "t.csv"
        path.write_text("Capacity,Pallets\n-5,3\n")
        with pytest.raises(SchemaError):
            read_truck_csv(str(path))


class TestPallets(object):

    def test_read(self, pallets_file):
        assert read_pallets_csv(str(pallets_file)) == [
            Item(id=1, weight=10, profit=18),
            Item(id=2, weight=15, profit=26),
            Item(id=3, weight=20, profit=30),
        ]

    def test_header_only(self, tmp_path):
        path = tmp_path / "p.csv"
        path.write_text("Pallet,Weight,Profit\n")
        assert read_pallets_csv(str(path)) == []

    def test_short_row(self, tmp_path):
        path = tmp_path / "p.csv"
        path.write_text("Pallet,Weight,Profit\n1,2\n")
        with pytest.raises(SchemaError, match=r"\[1\]"):
            read_pallets_csv(str(path))

    def test_bad_profit(self, tmp_path):
        path = tmp_path / "p.csv"
        path.write_text("Pallet,Weight,Profit\n1,2,3\n2,4,x\n")
        with pytest.raises(SchemaError, match=r"\[2\].*profit"):
            read_pallets_csv(str(path))

    def test_negative_weight(self, tmp_path):
        path = tmp_path / "p.csv"
        path.write_text("Pallet,Weight,Profit\n1,-2,3\n")
        with pytest.raises(SchemaError, match="weight"):
            read_pallets_csv(str(path))

    def test_duplicate_id(self, tmp_path):
        path = tmp_path / "p.csv"
        path.write_text("Pallet,Weight,Profit\n1,2,3\n1,4,5\n")
        with pytest.raises(SchemaError, match="duplicate"):
            read_pallets_csv(str(path))


class TestLoadDataset(object):

    def test_load(self, truck_file, pallets_file):
        inst = load_dataset(str(truck_file), str(pallets_file))
        assert inst.capacity == 90
        assert [it.id for it in inst.items] == [1, 2, 3]

    def test_count_mismatch_warns(self, tmp_path, pallets_file, caplog):
        truck = tmp_path / "t.csv"
        truck.write_text("Capacity,Pallets\n90,5\n")
        with caplog.at_level(logging.WARNING, logger="pallet_knapsack"):
            inst = load_dataset(str(truck), str(pallets_file))
        assert len(inst.items) == 3
        assert "declares 5 pallet(s)" in caplog.text


class TestUnreadableContent(object):

    def test_pallets_not_utf8(self, tmp_path):
        path = tmp_path / "p.csv"
        path.write_bytes(b"Pallet,Weight,Profit\n1,2,\xff\xfe\n")
        with pytest.raises(SchemaError, match="failed to read") as info:
            read_pallets_csv(str(path))
        assert isinstance(info.value.__cause__, UnicodeDecodeError)

    def test_truck_not_utf8(self, tmp_path):
        path = tmp_path / "t.csv"
        path.write_bytes(b"Capacity,Pallets\n\xff0,1\n")
        with pytest.raises(SchemaError, match="failed to read"):
            read_truck_csv(str(path))

    def test_field_over_csv_limit(self, tmp_path):
        path = tmp_path / "p.csv"
        path.write_text("Pallet,Weight,Profit\n1,2," + "9" * 200000 + "\n")
        with pytest.raises(SchemaError, match="failed to read") as info:
            read_pallets_csv(str(path))
        assert isinstance(info.value.__cause__, csv.Error)
