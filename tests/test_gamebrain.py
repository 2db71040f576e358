import random
from collections import Counter

import pytest

from rpsbrain import BrainConfig, GameBrain, InvalidMoveError, Move, Outcome, PatternTable

R, P, S = Move.ROCK, Move.PAPER, Move.SCISSORS


def play_rounds(brain: GameBrain, moves):
    out = []
    for m in moves:
        out.append(brain.choose_opponent_move())
        brain.record_player_move(m)
    return out


def test_deterministic_walkthrough():
    brain = GameBrain(seed=11)
    seen = []
    for m in (R, P, R):
        brain.choose_opponent_move()
        seen.append(brain.last_prediction)
        brain.record_player_move(m)
    brain.choose_opponent_move()
    seen.append(brain.last_prediction)

    assert [p.confidence for p in seen] == [33, 33, 50, 82]
    assert seen[2].move is P
    assert seen[3].move is S
    assert brain.pattern_table.to_dict() == {"rock-paper": 1, "paper-rock": 1}


def test_choose_does_not_record():
    brain = GameBrain(seed=1)
    for _ in range(5):
        assert brain.choose_opponent_move() in Move
    assert len(brain) == 0


def test_no_lookahead():
    brain = GameBrain(seed=3)
    play_rounds(brain, [R, R, P, S, R, P])
    a, b = brain.clone(), brain.clone()

    ma = a.choose_opponent_move()
    a.record_player_move(R)
    mb = b.choose_opponent_move()
    b.record_player_move(S)
    assert ma == mb

    move = brain.choose_opponent_move()
    c1, c2 = brain.clone(), brain.clone()
    c1.record_player_move(P)
    c2.record_player_move(S)
    assert move == ma
    assert c1.moves[-1] is P and c2.moves[-1] is S
    assert len(brain) == 6


def test_clone_is_independent():
    brain = GameBrain(seed=4)
    play_rounds(brain, [R, P])
    twin = brain.clone()
    twin.record_player_move(S)
    assert brain.moves == (R, P)
    assert twin.pattern_table[(P, S)] == 1
    assert brain.pattern_table[(P, S)] == 0


def test_reset_restores_initial_state():
    brain = GameBrain(seed=8)
    play_rounds(brain, [R, R, P, S, S, R])
    brain.reset()
    assert len(brain) == 0
    assert brain.pattern_table == PatternTable()
    assert brain.last_prediction is None

    # same rng state -> same move stream as a fresh brain
    brain.rng.seed(77)
    fresh = GameBrain(seed=77)
    script = [P, P, R, S, R, P, S, S, R]
    assert play_rounds(brain, script) == play_rounds(fresh, script)


def test_reset_distribution_matches_fresh():
    brain = GameBrain(seed=21)
    n = 6000
    counts = Counter()
    for _ in range(n):
        play_rounds(brain, [R, R, R])
        brain.reset()
        counts[brain.predict_next_move().move] += 1
    for m in Move:
        assert abs(counts[m] / n - 1 / 3) < 0.03


def test_record_rejects_invalid_move():
    brain = GameBrain(seed=0)
    with pytest.raises(InvalidMoveError):
        brain.record_player_move("lizard")
    assert len(brain) == 0


def test_record_accepts_names():
    brain = GameBrain(seed=0)
    brain.record_player_move("paper")
    brain.record_player_move(2)
    assert brain.moves == (P, S)


def test_resolve_round():
    brain = GameBrain()
    assert brain.resolve_round(R, S) is Outcome.WIN
    assert brain.resolve_round("paper", "scissors") is Outcome.LOSE
    assert brain.resolve_round(S, S) is Outcome.TIE


def test_beats_repetitive_player():
    brain = GameBrain(seed=5)
    wins = 0
    for _ in range(100):
        ai = brain.choose_opponent_move()
        brain.record_player_move(P)
        if brain.resolve_round(P, ai) is Outcome.LOSE:
            wins += 1
    assert wins >= 60


def test_injected_rng_and_config():
    rng = random.Random(1)
    brain = GameBrain(BrainConfig(counter_probability=1.0), rng=rng)
    assert brain.rng is rng
    assert brain.selector.rng is rng
    play_rounds(brain, [R, R])
    # frequency says rock, so the bot always plays paper
    assert brain.choose_opponent_move() is P


def test_shown_prediction_is_the_one_played():
    for seed in range(30):
        brain = GameBrain(seed=seed)
        shown = brain.predict_next_move()
        assert brain.predict_next_move() is shown
        brain.choose_opponent_move()
        assert brain.last_prediction == shown


def test_showing_prediction_keeps_move_stream():
    script = [R, P, S, S, R]
    for seed in range(30):
        watched, plain = GameBrain(seed=seed), GameBrain(seed=seed)
        got, want = [], []
        for m in script:
            watched.predict_next_move()
            got.append(watched.choose_opponent_move())
            watched.record_player_move(m)
            want.append(plain.choose_opponent_move())
            plain.record_player_move(m)
        assert got == want


def test_prediction_refreshes_after_record_and_reset():
    brain = GameBrain(seed=6)
    play_rounds(brain, [R, P])
    assert brain.predict_next_move().confidence == 50
    brain.record_player_move(R)
    assert brain.predict_next_move().confidence == 82
    brain.reset()
    assert brain.predict_next_move().confidence == 33
