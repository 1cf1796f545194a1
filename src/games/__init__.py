# Games package for the Sacred Geometry solver
from .expression_parser import ExpressionParser
from .permutations import distinct_permutations, next_permutation
from .sacred_geometry import TIERS, SacredGeometryGame, Solution, Tier, tier_for_level
from .solver import ExpressionSearcher, Operator

__all__ = [
    'ExpressionParser',
    'ExpressionSearcher',
    'Operator',
    'SacredGeometryGame',
    'Solution',
    'Tier',
    'TIERS',
    'distinct_permutations',
    'next_permutation',
    'tier_for_level',
]
