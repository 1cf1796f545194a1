"""
Sacred Geometry - tier table and the solving loop.

Pathfinder's Sacred Geometry feat asks the caster to combine a pool of d6
rolls with +, -, * and / into one of three prime constants that depend on the
spell level. This module pairs the permutation generator with the expression
searcher to decide whether the current pool can do it.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .permutations import next_permutation
from .solver import ExpressionSearcher, Operator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tier:
    """A spell level's goal set (zero-based index)."""
    index: int
    goals: Tuple[int, int, int]

    @property
    def spell_level(self) -> int:
        return self.index + 1


# Prime constants per spell level 1-9
TIERS: Tuple[Tier, ...] = (
    Tier(0, (3, 5, 7)),
    Tier(1, (11, 13, 17)),
    Tier(2, (19, 23, 29)),
    Tier(3, (31, 37, 41)),
    Tier(4, (43, 47, 53)),
    Tier(5, (59, 61, 67)),
    Tier(6, (71, 73, 79)),
    Tier(7, (83, 89, 97)),
    Tier(8, (101, 103, 107)),
)

MIN_SPELL_LEVEL = 1
MAX_SPELL_LEVEL = len(TIERS)


def tier_for_level(spell_level: int) -> Tier:
    """Clamp spell_level to 1-9 and return its tier."""
    spell_level = min(max(spell_level, MIN_SPELL_LEVEL), MAX_SPELL_LEVEL)
    return TIERS[spell_level - 1]


@dataclass
class Solution:
    """A dice ordering and operator sequence that reaches one of a tier's goals."""
    dice: List[int]
    operators: List[Operator]
    goal_index: int
    target: int
    permutations_tried: int = 1

    def evaluate(self) -> int:
        """Re-run the expression left to right."""
        return ExpressionSearcher().evaluate(self.dice, self.operators)


@dataclass
class SacredGeometryGame:
    """
    Rolls dice pools and searches them for a Sacred Geometry solution.

    Args:
        max_dice: Largest pool rolled or read; extra dice are dropped.
        die_sides: Faces on each rolled die.
        rng: Random source for rolls.
    """
    max_dice: int = 20
    die_sides: int = 6
    rng: random.Random = field(default_factory=random.Random)

    def roll_dice(self, count: int) -> List[int]:
        """Roll count dice, clamped to 0..max_dice."""
        count = min(max(count, 0), self.max_dice)
        return [self.rng.randint(1, self.die_sides) for _ in range(count)]

    def solve(self, dice: Sequence[int], tier: Tier) -> Optional[Solution]:
        """
        Search every distinct ordering of dice for one that reaches a goal of tier.

        Args:
            dice: The pool, in any order. Not modified.
            tier: Tier whose goals are targeted.

        Returns:
            The first Solution found, or None if no ordering works.
        """
        if not dice:
            return None

        # Permutation walk needs ascending order to cover every arrangement once
        working = sorted(dice)
        ops: List[Optional[Operator]] = [None] * (len(working) - 1)
        searcher = ExpressionSearcher()

        tried = 1
        goal = searcher.search(working[0], 1, working, ops, tier.goals)
        while goal is None and next_permutation(working):
            tried += 1
            goal = searcher.search(working[0], 1, working, ops, tier.goals)

        if goal is None:
            logger.debug("No solution for %s at spell level %d after %d permutations (%d nodes)",
                         sorted(dice), tier.spell_level, tried, searcher.nodes_visited)
            return None

        logger.debug("Reached %d after %d permutations (%d nodes)",
                     tier.goals[goal], tried, searcher.nodes_visited)
        return Solution(
            dice=working,
            operators=list(ops),
            goal_index=goal,
            target=tier.goals[goal],
            permutations_tried=tried
        )
