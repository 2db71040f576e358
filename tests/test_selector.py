import random
from collections import Counter

import pytest

from rpsbrain import COUNTER, Move, MoveSelector, Prediction


def test_counter_rate():
    sel = MoveSelector(random.Random(2024))
    pred = Prediction(Move.ROCK, 80, "frequency")
    n = 12000
    hits = sum(1 for _ in range(n) if sel.choose(pred) is COUNTER[Move.ROCK])
    assert abs(hits / n - (0.7 + 0.3 / 3)) < 0.02
    assert sel.counter_rate() == pytest.approx(0.8)


def test_always_counter():
    sel = MoveSelector(random.Random(0), counter_probability=1.0)
    for m in Move:
        assert sel.choose(Prediction(m, 50)) is COUNTER[m]


def test_never_counter_is_uniform():
    sel = MoveSelector(random.Random(5), counter_probability=0.0)
    n = 9000
    counts = Counter(sel.choose(Prediction(Move.PAPER, 50)) for _ in range(n))
    for m in Move:
        assert abs(counts[m] / n - 1 / 3) < 0.03


def test_rejects_bad_probability():
    with pytest.raises(ValueError):
        MoveSelector(counter_probability=1.5)
