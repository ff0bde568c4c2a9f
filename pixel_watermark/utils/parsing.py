"""
Strict integer parsing for interactive answers
"""

import re
from typing import List, Optional

_INT_TOKEN = re.compile(r'[+-]?\d+')


def parse_int(text: str) -> int:
    """
    Parse a whole token as an integer. Unlike int(), surrounding
    whitespace and digit separators are rejected.
    """
    if not _INT_TOKEN.fullmatch(text):
        raise ValueError(f"Not an integer: {text!r}")
    return int(text)


def parse_int_tokens(text: str, count: Optional[int] = None) -> List[int]:
    """Split on single spaces and parse every token"""
    tokens = text.split(' ')
    if count is not None and len(tokens) != count:
        raise ValueError(f"Expected {count} values, got {len(tokens)}")
    return [parse_int(token) for token in tokens]
