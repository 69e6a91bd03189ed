from __future__ import annotations
import string
from typing import Dict, List

# Letters worth more than the default single point.
SPECIAL_LETTERS = {
    2: 'LCFHMPVWY',
    3: 'JKQXZ',
}

DEFAULT_VALUE = 1


def point_values() -> Dict[str, int]:
    values = {l: DEFAULT_VALUE for l in string.ascii_uppercase}
    for val, letters in SPECIAL_LETTERS.items():
        for l in letters:
            values[l] = val
    return values


def point_letters(values: Dict[str, int]) -> Dict[int, List[str]]:
    # Inverse of point_values, for the help page.
    res: Dict[int, List[str]] = {}
    for l, v in values.items():
        res.setdefault(v, []).append(l)
    return {v: sorted(letters) for v, letters in sorted(res.items())}


def invert_points(values: Dict[str, int]) -> Dict[str, int]:
    # Cheap letters are common, expensive letters are rare.
    return {l: 1000 // v for l, v in values.items()}
