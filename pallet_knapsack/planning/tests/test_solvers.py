# Cross-solver properties and the reference scenarios

import copy
import itertools
import random

import pytest
from pallet_knapsack.business_objects import Item
from pallet_knapsack.planning import validate_result
from pallet_knapsack.planning.solvers import (
    SOLVERS,
    solve_brute_force,
    solve_dynamic,
    solve_greedy,
    solve_branch_and_bound,
)


def random_instances(count=60, seed=2025):
    rng = random.Random(seed)
    for _ in range(count):
        n = rng.randint(0, 9)
        items = [
            Item(id=i + 1, weight=rng.randint(1, 12), profit=rng.randint(0, 20))
            for i in range(n)
        ]
        yield rng.randint(0, 30), items


def optimal_subsets(capacity, items):
    """All subsets attaining the optimum, by plain enumeration."""
    best = 0
    subsets = []
    for r in range(len(items) + 1):
        for combo in itertools.combinations(items, r):
            w = sum(it.weight for it in combo)
            if w > capacity:
                continue
            p = sum(it.profit for it in combo)
            if p > best:
                best, subsets = p, [combo]
            elif p == best:
                subsets.append(combo)
    return best, subsets


@pytest.fixture
def three_items():
    return [
        Item(id=1, weight=5, profit=10),
        Item(id=2, weight=4, profit=40),
        Item(id=3, weight=6, profit=30),
    ]


class TestScenarios(object):

    @pytest.mark.parametrize("algorithm", sorted(SOLVERS))
    def test_three_items(self, algorithm, three_items):
        res = SOLVERS[algorithm](10, three_items)
        assert res.total_profit == 70
        assert sorted(res.selection) == [2, 3]
        assert res.total_weight == 10

    @pytest.mark.parametrize("algorithm", sorted(SOLVERS))
    def test_zero_capacity(self, algorithm, three_items):
        res = SOLVERS[algorithm](0, three_items)
        assert res.total_profit == 0
        assert res.selection == ()
        assert res.total_weight == 0

    @pytest.mark.parametrize("algorithm", sorted(SOLVERS))
    def test_empty_items(self, algorithm):
        res = SOLVERS[algorithm](50, [])
        assert res.total_profit == 0
        assert res.selection == ()
        assert res.total_weight == 0

    def test_equal_ratio_items(self):
        items = [Item(id=1, weight=2, profit=4), Item(id=2, weight=4, profit=8)]
        for solver in (solve_brute_force, solve_dynamic, solve_branch_and_bound):
            res = solver(4, items)
            assert res.total_profit == 8
            assert res.selection == (2,)

        res = solve_greedy(4, items)
        assert res.total_weight <= 4
        assert res.total_profit <= 8
        validate_result(res, items, 4)


class TestProperties(object):

    def test_dynamic_matches_brute_force(self):
        for capacity, items in random_instances():
            assert solve_dynamic(capacity, items).total_profit == \
                solve_brute_force(capacity, items).total_profit

    def test_branch_and_bound_is_optimal(self):
        for capacity, items in random_instances():
            best, _ = optimal_subsets(capacity, items)
            assert solve_branch_and_bound(capacity, items).total_profit == best

    def test_greedy_never_beats_dynamic(self):
        for capacity, items in random_instances():
            assert solve_greedy(capacity, items).total_profit <= \
                solve_dynamic(capacity, items).total_profit

    @pytest.mark.parametrize("algorithm", sorted(SOLVERS))
    def test_results_are_consistent(self, algorithm):
        for capacity, items in random_instances(count=30, seed=7):
            res = SOLVERS[algorithm](capacity, items)
            validate_result(res, items, capacity)
            assert len(set(res.selection)) == len(res.selection)

    @pytest.mark.parametrize("algorithm", sorted(SOLVERS))
    def test_idempotent_and_no_mutation(self, algorithm):
        for capacity, items in random_instances(count=15, seed=11):
            before = copy.deepcopy(items)
            first = SOLVERS[algorithm](capacity, items)
            second = SOLVERS[algorithm](capacity, items)
            assert first == second
            assert items == before

    def test_brute_force_prefers_fewest_items(self):
        for capacity, items in random_instances(seed=3):
            _, subsets = optimal_subsets(capacity, items)
            fewest = min(len(s) for s in subsets)
            assert len(solve_brute_force(capacity, items).selection) == fewest

    def test_branch_and_bound_tie_break_order(self):
        for capacity, items in random_instances(seed=5):
            _, subsets = optimal_subsets(capacity, items)
            key = min((len(s), sum(it.weight for it in s)) for s in subsets)
            res = solve_branch_and_bound(capacity, items)
            assert (len(res.selection), res.total_weight) == key


class TestGreedy(object):

    def test_not_always_optimal(self):
        items = [
            Item(id=1, weight=6, profit=30),
            Item(id=2, weight=5, profit=20),
            Item(id=3, weight=5, profit=20),
        ]
        assert solve_greedy(10, items).total_profit == 30
        assert solve_dynamic(10, items).total_profit == 40

    def test_ratio_order(self, three_items):
        assert solve_greedy(10, three_items).selection == (2, 3)

    def test_stable_on_equal_ratios(self):
        items = [
            Item(id=5, weight=3, profit=6),
            Item(id=2, weight=1, profit=2),
            Item(id=9, weight=2, profit=4),
        ]
        assert solve_greedy(100, items).selection == (5, 2, 9)

    def test_zero_weight_items(self):
        items = [
            Item(id=1, weight=3, profit=9),
            Item(id=2, weight=0, profit=4),
            Item(id=3, weight=0, profit=0),
        ]
        res = solve_greedy(0, items)
        assert res.selection == (2, 3)
        assert res.total_profit == 4
        assert res.total_weight == 0

    def test_skipped_item_not_reconsidered(self):
        items = [
            Item(id=1, weight=4, profit=40),
            Item(id=2, weight=7, profit=35),
            Item(id=3, weight=2, profit=2),
        ]
        res = solve_greedy(8, items)
        assert res.selection == (1, 3)
        assert res.total_weight == 6


class TestLongInstances(object):

    @pytest.mark.parametrize("algorithm", sorted(SOLVERS))
    def test_zero_capacity_many_items(self, algorithm):
        items = [Item(id=i, weight=1, profit=1) for i in range(1500)]
        res = SOLVERS[algorithm](0, items)
        assert res.selection == ()
        assert (res.total_profit, res.total_weight) == (0, 0)

    @pytest.mark.parametrize("algorithm", sorted(SOLVERS))
    def test_capacity_below_every_weight(self, algorithm):
        items = [Item(id=i, weight=5 + i % 3, profit=2) for i in range(2000)]
        res = SOLVERS[algorithm](4, items)
        assert res.selection == ()
        assert res.total_profit == 0

    def test_single_fitting_item_among_many(self):
        items = [Item(id=i, weight=10, profit=1) for i in range(1200)]
        items.append(Item(id=5000, weight=3, profit=7))
        for solver in (solve_brute_force, solve_branch_and_bound):
            res = solver(3, items)
            assert res.selection == (5000,)
            assert res.total_profit == 7

    def test_exploration_order_on_full_tie(self):
        items = [Item(id=1, weight=2, profit=6), Item(id=2, weight=2, profit=6)]
        # exclude-first meets {2} first, include-first meets {1} first
        assert solve_brute_force(2, items).selection == (2,)
        assert solve_branch_and_bound(2, items).selection == (1,)
