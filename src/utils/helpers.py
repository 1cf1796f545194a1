import re
from typing import Callable, Iterable

# Same forms as C's %i: hex with 0x, octal with a leading 0, otherwise decimal
_LEADING_INT = re.compile(r'\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9]\d*)')


def parse_leading_int(text: str):
    """Return the integer at the start of text, or None if there isn't one."""
    match = _LEADING_INT.match(text)
    if not match:
        return None
    sign, digits = match.groups()
    if digits[:2].lower() == '0x':
        value = int(digits[2:], 16)
    elif digits.startswith('0'):
        value = int(digits, 8)
    else:
        value = int(digits)
    return -value if sign == '-' else value


def read_int(prompt: str, input_func: Callable[[str], str] = input) -> int:
    """
    Keep prompting until the reply starts with an integer.
    Malformed replies are ignored without comment.
    """
    while True:
        value = parse_leading_int(input_func(prompt))
        if value is not None:
            return value


def format_int_array(values: Iterable[int]) -> str:
    return ' '.join(str(v) for v in values)
