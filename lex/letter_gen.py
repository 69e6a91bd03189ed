from __future__ import annotations
import bisect
import random
from typing import Dict, Iterable, List, Mapping, Tuple

from .errors import SamplerMisconfiguration
from .points import invert_points
from .words import count


class LetterGen:
    """Draws letters in proportion to fixed integer weights.

    The table is immutable once built, so one instance can serve every game;
    randomness always comes from the caller's own `random.Random`.
    """

    def __init__(self, freqs: Mapping[str, int]):
        self.freqs: Dict[str, int] = dict(freqs)
        # Sorted so the same weights always give the same table.
        self._letters: List[str] = []
        self._masses: List[int] = []
        mass = 0
        for l in sorted(self.freqs):
            if self.freqs[l] <= 0:
                continue
            mass += self.freqs[l]
            self._letters.append(l)
            self._masses.append(mass)
        self.total = mass
        if not self._letters:
            raise SamplerMisconfiguration(f"no letter has a positive weight: {self.freqs}")

    @classmethod
    def from_points(cls, values: Mapping[str, int]) -> 'LetterGen':
        return cls(invert_points(dict(values)))

    @classmethod
    def from_corpus(cls, words: Iterable[str]) -> 'LetterGen':
        freqs: Dict[str, int] = {}
        for word in words:
            for l, c in count(word).items():
                freqs[l] = freqs.get(l, 0) + c
        return cls(freqs)

    @property
    def cdf(self) -> List[Tuple[str, int]]:
        return list(zip(self._letters, self._masses))

    def next(self, rng: random.Random) -> str:
        x = rng.randrange(self.total)
        i = bisect.bisect_right(self._masses, x)
        if i >= len(self._letters):
            raise SamplerMisconfiguration(f"draw {x} beyond total mass {self.total}")
        return self._letters[i]
