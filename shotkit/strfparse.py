"""Safe expansion of strftime-style specifiers in file name patterns."""

from __future__ import annotations

from collections import Counter
from datetime import datetime

_BUFFER_SIZE = 100

_ALLOWED_SPECIFIERS = [
    "Y", "H", "a", "A", "b", "B", "c", "C",
    "d", "D", "e", "F", "g", "G", "h", "H",
    "I", "j", "m", "M", "n", "p", "r", "R",
    "S", "t", "T", "u", "U", "V", "w", "W",
    "x", "X", "y", "Y", "z", "Z",
]


def split(text: str, delimiter: str) -> list[str]:
    """Split like a line reader: no trailing empty token, nothing for empty input."""
    tokens = text.split(delimiter)
    if tokens[-1] == "":
        tokens.pop()
    return tokens


def create_specifier_list() -> list[str]:
    """Return the specifier characters that may be expanded."""
    return list(_ALLOWED_SPECIFIERS)


def replace_all(text: str, to_find: str, to_replace: str) -> str:
    """Replace every occurrence of *to_find*, scanning past each replacement."""
    return text.replace(to_find, to_replace)


def match_specifiers(specifier: str, allowed_specifier: list[str]) -> list[str]:
    """Return the sorted multiset intersection of used and allowed specifiers."""
    used = Counter(after for before, after in zip(specifier, specifier[1:]) if before == "%")
    overlap = used & Counter(allowed_specifier)
    return sorted(overlap.elements())


def format_time_string(specifier: str, when: datetime | None = None) -> str:
    """Expand the allowed ``%`` specifiers in *specifier* for the time *when*."""
    if not specifier:
        return ""
    moment = when if when is not None else datetime.now().astimezone()

    overlap = match_specifiers(specifier, create_specifier_list())
    lookup_string = "".join(f"%{spec}*" for spec in overlap)
    expanded = moment.strftime(lookup_string) if lookup_string else ""
    if len(expanded) >= _BUFFER_SIZE:
        expanded = ""

    lookup_table: dict[str, str] = {}
    for spec, value in zip(overlap, split(expanded, "*")):
        lookup_table.setdefault(spec, value)

    output = specifier
    for spec in sorted(lookup_table):
        output = replace_all(output, "%" + spec, lookup_table[spec])
    return output