from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

import numpy as np

from .utils import MOVES, Move

PatternKey = Tuple[Move, Move]


class PatternTable:
    """Counts of consecutive move pairs, held in a 3x3 table indexed [first, second]."""

    def __init__(self) -> None:
        self.counts = np.zeros((3, 3), dtype=np.int64)

    def observe(self, first: Move, second: Move) -> None:
        self.counts[int(first), int(second)] += 1

    def count(self, key: PatternKey) -> int:
        first, second = key
        return int(self.counts[int(first), int(second)])

    def __getitem__(self, key: PatternKey) -> int:
        return self.count(key)

    def keys(self) -> List[PatternKey]:
        return [(a, b) for a in MOVES for b in MOVES if self.counts[int(a), int(b)] > 0]

    def total(self) -> int:
        return int(self.counts.sum())

    def clear(self) -> None:
        self.counts[:] = 0

    def to_dict(self) -> dict:
        return {f"{a.label}-{b.label}": self.count((a, b)) for a, b in self.keys()}

    @staticmethod
    def from_moves(moves: Iterable[Move]) -> "PatternTable":
        table = PatternTable()
        seq = list(moves)
        for i in range(1, len(seq)):
            table.observe(seq[i - 1], seq[i])
        return table

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PatternTable):
            return NotImplemented
        return bool(np.array_equal(self.counts, other.counts))

    def __repr__(self) -> str:
        return f"PatternTable({self.to_dict()!r})"


class MoveHistory:
    """Append-only record of the human player's moves for one session.

    Every append that completes a 2-move window bumps that window's count in
    ``patterns`` exactly once, so the table always equals
    ``PatternTable.from_moves(history)``.
    """

    def __init__(self) -> None:
        self._moves: List[Move] = []
        self.patterns = PatternTable()

    def append(self, move: Move) -> None:
        self._moves.append(move)
        if len(self._moves) >= 2:
            self.patterns.observe(self._moves[-2], self._moves[-1])

    def snapshot(self) -> Tuple[Move, ...]:
        return tuple(self._moves)

    def last(self, n: int) -> Tuple[Move, ...]:
        if n <= 0:
            return ()
        return tuple(self._moves[-n:])

    def clear(self) -> None:
        self._moves.clear()
        self.patterns.clear()

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)

    def __repr__(self) -> str:
        return f"MoveHistory({[m.label for m in self._moves]!r})"
