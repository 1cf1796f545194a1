import logging
import operator
from enum import Enum
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)


class Operator(Enum):
    """Binary operators in search priority order."""
    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def is_multiplicative(self) -> bool:
        """True for the operators that bind tighter under standard precedence."""
        return self in (Operator.MULTIPLY, Operator.DIVIDE)


class ExpressionSearcher:
    """
    Finds an operator sequence that drives a fixed ordering of dice to a goal.

    Operators are applied strictly left to right. Division is only taken when
    it is exact, anything else prunes the branch.
    """

    OPS = {
        Operator.ADD: operator.add,
        Operator.SUBTRACT: operator.sub,
        Operator.MULTIPLY: operator.mul,
        Operator.DIVIDE: operator.floordiv  # Only reached with zero remainder
    }

    def __init__(self):
        self.nodes_visited = 0

    @staticmethod
    def divides(working: int, divisor: int) -> bool:
        """Check whether working / divisor is an exact integer."""
        return divisor != 0 and working % divisor == 0

    def search(self, working: int, index: int, dice: Sequence[int],
               ops: List[Optional[Operator]], goals: Sequence[int]) -> Optional[int]:
        """
        Recursively try every operator assignment for dice[index:].

        Args:
            working: Result of the operations so far (dice[0] on the first call).
            index: Position in dice of the next operand.
            dice: The ordering being tested.
            ops: Buffer of len(dice) - 1 slots; ops[index - 1] is filled in on success.
            goals: Target values, checked in order.

        Returns:
            Index into goals of the value reached, or None if no assignment works.
        """
        self.nodes_visited += 1

        # All operands consumed, test against the goals
        if index == len(dice):
            for goal_index, goal in enumerate(goals):
                if working == goal:
                    return goal_index
            return None

        operand = dice[index]
        for op in Operator:
            if op is Operator.DIVIDE and not self.divides(working, operand):
                continue

            result = self.search(self.OPS[op](working, operand), index + 1, dice, ops, goals)
            if result is not None:
                ops[index - 1] = op
                return result

        return None

    def evaluate(self, dice: Sequence[int], ops: Sequence[Operator]) -> int:
        """
        Apply ops between consecutive dice, left to right.

        Raises:
            ValueError: If the lengths disagree or a division is not exact
        """
        if not dice:
            raise ValueError("No dice to evaluate")
        if len(ops) != len(dice) - 1:
            raise ValueError(f"Expected {len(dice) - 1} operators, got {len(ops)}")

        working = dice[0]
        for op, operand in zip(ops, dice[1:]):
            if op is Operator.DIVIDE and not self.divides(working, operand):
                raise ValueError(f"{working} is not evenly divisible by {operand}")
            working = self.OPS[op](working, operand)
        return working
