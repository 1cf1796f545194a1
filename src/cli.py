import logging
import random
from typing import Callable, List, Optional

from config.config import Config
from games.expression_parser import ExpressionParser
from games.sacred_geometry import SacredGeometryGame, Solution, Tier, tier_for_level
from utils.helpers import format_int_array, read_int

logger = logging.getLogger(__name__)

BANNER = (
    "Pathfinder - Sacred Geometry\n"
    "Feat Solution Finder\n"
    "============================"
)

# Ranks value that switches to typing in rolls by hand
MANUAL_ROLLS = -1


class SacredGeometryCLI:
    """Prompt-driven front end: ask for a spell level and dice, print the answer."""

    def __init__(self, config: Config,
                 input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print):
        self.config = config
        self.input = input_func
        self.output = output_func
        self.parser = ExpressionParser()
        self.game = SacredGeometryGame(
            max_dice=config.max_dice,
            die_sides=config.die_sides,
            rng=random.Random(config.seed)
        )

    def prompt_tier(self) -> Tier:
        level = read_int("Spell Level: ", self.input)
        return tier_for_level(level)

    def prompt_dice(self) -> List[int]:
        """Ask for a ranks count and either roll that many dice or read typed rolls."""
        count = read_int("Knowledge (engineering) ranks (-1 to input dice rolls): ", self.input)
        if count == MANUAL_ROLLS:
            line = self.input("Dice Rolls (spaces between): ")
            return self.parser.extract_numbers(line, limit=self.game.max_dice)
        return self.game.roll_dice(count)

    def render(self, solution: Optional[Solution]) -> str:
        if solution is None:
            return "No valid result found!"
        expression = self.parser.format_solution(solution.dice, solution.operators)

        # Parentheses must make normal precedence agree with left-to-right order
        ok, value, error = self.parser.evaluate(expression)
        if not ok or value != solution.target:
            raise ValueError(f"Expression {expression!r} does not evaluate to {solution.target}: "
                             f"{error or value}")
        return f"Valid: {solution.target} = {expression}"

    def run(self) -> Optional[Solution]:
        self.output(BANNER)
        tier = self.prompt_tier()
        dice = self.prompt_dice()
        logger.debug("Spell level %d, goals %s", tier.spell_level, tier.goals)

        self.output(f"Dice rolls: {format_int_array(dice)}")

        solution = self.game.solve(dice, tier)
        self.output(self.render(solution))
        return solution
