import itertools
import random

import pytest

from games.expression_parser import ExpressionParser
from games.sacred_geometry import TIERS, SacredGeometryGame, tier_for_level
from games.solver import Operator


def left_to_right(dice, ops):
    working = dice[0]
    for op, operand in zip(ops, dice[1:]):
        if op == '+':
            working += operand
        elif op == '-':
            working -= operand
        elif op == '*':
            working *= operand
        else:
            if operand == 0 or working % operand:
                return None
            working //= operand
    return working


def brute_force(dice, goals):
    """Every ordering and every operator string, no pruning or dedup."""
    for order in itertools.permutations(dice):
        for ops in itertools.product('+-*/', repeat=len(dice) - 1):
            if left_to_right(order, ops) in goals:
                return True
    return False


@pytest.fixture
def game():
    return SacredGeometryGame(rng=random.Random(1234))


def test_tier_table():
    assert len(TIERS) == 9
    assert TIERS[0].goals == (3, 5, 7)
    assert TIERS[8].goals == (101, 103, 107)
    for index, tier in enumerate(TIERS):
        assert tier.index == index
        assert tier.spell_level == index + 1
        assert list(tier.goals) == sorted(tier.goals)


@pytest.mark.parametrize("level,index", [(-4, 0), (0, 0), (1, 0), (5, 4), (9, 8), (15, 8)])
def test_spell_level_is_clamped(level, index):
    assert tier_for_level(level) is TIERS[index]


def test_three_five_seven(game):
    dice = [7, 5, 3]
    solution = game.solve(dice, TIERS[0])

    assert solution is not None
    assert solution.dice == [3, 5, 7]
    assert solution.operators == [Operator.SUBTRACT, Operator.ADD]
    assert solution.goal_index == 1
    assert solution.target == 5
    assert solution.permutations_tried == 1
    assert solution.evaluate() == 5
    assert dice == [7, 5, 3]


def test_one_one_has_no_solution(game):
    assert game.solve([1, 1], TIERS[0]) is None


def test_empty_pool_has_no_solution(game):
    assert game.solve([], TIERS[0]) is None


def test_single_die(game):
    solution = game.solve([7], TIERS[0])
    assert solution.target == 7
    assert solution.goal_index == 2
    assert solution.operators == []
    assert game.solve([4], TIERS[0]) is None


@pytest.mark.parametrize("tier", TIERS)
def test_never_divides_one_by_three(game, tier):
    solution = game.solve([3, 1], tier)
    if solution is not None and solution.dice == [1, 3]:
        assert solution.operators != [Operator.DIVIDE]


def test_later_permutation_is_used(game):
    # [2, 6] fails; [6, 2] reaches 6 / 2 = 3
    solution = game.solve([2, 6], TIERS[0])
    assert solution.dice == [6, 2]
    assert solution.operators == [Operator.DIVIDE]
    assert solution.target == 3
    assert solution.permutations_tried == 2


def test_agrees_with_brute_force(game):
    rng = random.Random(99)
    parser = ExpressionParser()
    for _ in range(60):
        dice = [rng.randint(1, 6) for _ in range(rng.randint(1, 5))]
        tier = rng.choice(TIERS)
        solution = game.solve(dice, tier)

        assert (solution is not None) == brute_force(dice, tier.goals), (dice, tier)
        if solution is not None:
            assert sorted(solution.dice) == sorted(dice)
            assert len(solution.operators) == len(dice) - 1
            assert solution.evaluate() == solution.target == tier.goals[solution.goal_index]
            ok, value, _ = parser.evaluate(parser.format_solution(solution.dice, solution.operators))
            assert ok and value == solution.target


def test_six_dice_failure_agrees_with_brute_force(game):
    dice = [1, 1, 2, 1, 1, 1]
    assert game.solve(dice, TIERS[8]) is None
    assert not brute_force(dice, TIERS[8].goals)


def test_roll_dice(game):
    dice = game.roll_dice(12)
    assert len(dice) == 12
    assert all(1 <= d <= 6 for d in dice)

    assert game.roll_dice(-3) == []
    assert len(game.roll_dice(50)) == game.max_dice


def test_seeded_rolls_repeat():
    first = SacredGeometryGame(rng=random.Random(7)).roll_dice(10)
    second = SacredGeometryGame(rng=random.Random(7)).roll_dice(10)
    assert first == second

