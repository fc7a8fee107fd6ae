"""
SQL parameter binding utilities.

Statements are built with positional ``?`` markers. These helpers count the
markers in developer-authored fragments and rewrite them to indexed named
parameters (``:p_0``, ``:p_1``, ...) for drivers reached through SQLAlchemy.
"""

from typing import Any, Dict, Iterator, List, Sequence, Tuple

PLACEHOLDER = "?"
PARAM_PREFIX = "p_"


def _scan_placeholders(text: str) -> Iterator[int]:
    """Yield the offset of every ``?`` outside quoted literals and identifiers."""
    quote_char = None
    for index, char in enumerate(text):
        if quote_char:
            # Doubled quotes inside a literal toggle twice and cancel out
            if char == quote_char:
                quote_char = None
        elif char in ("'", '"'):
            quote_char = char
        elif char == PLACEHOLDER:
            yield index


def count_placeholders(fragment: str) -> int:
    """
    Count positional markers in a SQL fragment.

    Examples:
        >>> count_placeholders("price BETWEEN ? AND ?")
        2
        >>> count_placeholders("note = 'why?'")
        0
    """
    return sum(1 for _ in _scan_placeholders(fragment))


def positional_placeholders(count: int) -> List[str]:
    """Return ``count`` positional markers."""
    return [PLACEHOLDER] * count


def build_indexed_params(count: int) -> List[str]:
    """
    Build indexed parameter names for a statement with ``count`` markers.

    Examples:
        >>> build_indexed_params(3)
        ['p_0', 'p_1', 'p_2']
    """
    return [f"{PARAM_PREFIX}{i}" for i in range(count)]


def to_named_binds(text: str, parameters: Sequence[Any]) -> Tuple[str, Dict[str, Any]]:
    """
    Rewrite positional markers to indexed named binds.

    Args:
        text: Statement text with ``?`` markers
        parameters: One value per marker, in order

    Returns:
        Tuple of (text with ``:p_N`` binds, mapping of bind name to value)

    Raises:
        ValueError: If the number of markers and parameters differ

    Examples:
        >>> to_named_binds("SELECT * FROM Room WHERE hotelID = ?", [3])
        ('SELECT * FROM Room WHERE hotelID = :p_0', {'p_0': 3})
    """
    offsets = list(_scan_placeholders(text))
    if len(offsets) != len(parameters):
        raise ValueError(
            f"Statement has {len(offsets)} placeholder(s) "
            f"but {len(parameters)} parameter(s)"
        )

    names = build_indexed_params(len(offsets))
    pieces = []
    previous = 0
    for offset, name in zip(offsets, names):
        pieces.append(text[previous:offset])
        pieces.append(f":{name}")
        previous = offset + 1
    pieces.append(text[previous:])

    return "".join(pieces), dict(zip(names, parameters))
