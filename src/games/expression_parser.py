"""
Reading dice from free text and writing/checking solution expressions.
Uses Python's ast module to safely evaluate expressions without eval().
"""

import ast
import operator
import re
from typing import List, Optional, Sequence, Tuple

from .solver import Operator


def _exact_div(left: int, right: int) -> int:
    if right == 0:
        raise ValueError("Division by zero")
    if left % right != 0:
        raise ValueError(f"{left} / {right} is not a whole number")
    return left // right


class ExpressionParser:
    """
    Parses dice lists and renders/evaluates Sacred Geometry expressions.
    Only allows: +, -, *, / operators, integers, and parentheses.
    """

    # Mapping of AST operators to actual Python operators
    SAFE_OPERATORS = {
        ast.Add: operator.add,
        ast.Sub: operator.sub,
        ast.Mult: operator.mul,
        ast.Div: _exact_div,
    }

    # Characters allowed in expressions
    ALLOWED_CHARS = set('0123456789+-*/() ')

    def sanitize(self, expression: str) -> str:
        """Remove any characters not in the allowed set."""
        return ''.join(c for c in expression if c in self.ALLOWED_CHARS)

    def extract_numbers(self, text: str, limit: Optional[int] = None) -> List[int]:
        """
        Extract every run of digits from text as an integer.

        Args:
            text: Free text such as "3, 4 6 1"
            limit: Stop after this many numbers

        Returns:
            The numbers in the order they appear.
        """
        numbers = []
        for match in re.finditer(r'\d+', text):
            if limit is not None and len(numbers) >= limit:
                break
            numbers.append(int(match.group()))
        return numbers

    def format_solution(self, dice: Sequence[int], ops: Sequence[Operator]) -> str:
        """
        Render dice and ops as a left-to-right expression.

        Each run of +/- followed by * or / is closed with a parenthesis, and
        the matching opening parentheses all go at the front, so reading the
        result with normal precedence gives the left-to-right value.
        """
        if not dice:
            return ''

        def multiplicative(i: int) -> bool:
            return i < len(ops) and ops[i].is_multiplicative

        def opens_group(i: int) -> bool:
            return not multiplicative(i) and multiplicative(i + 1)

        parts = ['(' * sum(1 for i in range(len(ops)) if opens_group(i)) + str(dice[0])]
        for i, op in enumerate(ops):
            operand = str(dice[i + 1])
            if opens_group(i):
                operand += ')'
            parts.append(op.symbol)
            parts.append(operand)
        return ' '.join(parts)

    def _safe_eval(self, node: ast.AST) -> int:
        """
        Recursively evaluate AST node with only allowed operations.

        Raises:
            ValueError: If an unsupported operation is encountered
        """
        if isinstance(node, ast.Expression):
            return self._safe_eval(node.body)

        if isinstance(node, ast.Constant):
            if isinstance(node.value, int) and not isinstance(node.value, bool):
                return node.value
            raise ValueError("Only integer values allowed")

        if isinstance(node, ast.BinOp):
            op_type = type(node.op)
            if op_type not in self.SAFE_OPERATORS:
                raise ValueError(f"Operator not allowed: {op_type.__name__}")

            left = self._safe_eval(node.left)
            right = self._safe_eval(node.right)
            return self.SAFE_OPERATORS[op_type](left, right)

        if isinstance(node, ast.UnaryOp):
            if isinstance(node.op, ast.USub):
                return -self._safe_eval(node.operand)
            if isinstance(node.op, ast.UAdd):
                return self._safe_eval(node.operand)
            raise ValueError("Unsupported unary operator")

        raise ValueError("Invalid expression structure")

    def evaluate(self, expression: str) -> Tuple[bool, Optional[int], Optional[str]]:
        """
        Safely evaluate expression using AST parsing.

        Args:
            expression: The mathematical expression to evaluate

        Returns:
            Tuple of (success, result or None, error_message or None)
        """
        clean_expr = self.sanitize(expression)

        if not clean_expr.strip():
            return False, None, "Empty expression"

        try:
            tree = ast.parse(clean_expr, mode='eval')
            result = self._safe_eval(tree)
            return True, result, None

        except SyntaxError as e:
            return False, None, f"Invalid syntax: {str(e)}"
        except ValueError as e:
            return False, None, str(e)
