import random
from typing import Optional

from rpsbrain import Match, Move


def simulated_human(rng: random.Random, last: Optional[Move] = None) -> Move:
    # Simulated human: sticks with the last move half the time
    if last is not None and rng.random() < 0.5:
        return last
    return rng.choice(list(Move))


def main():
    rng = random.Random(7)
    match = Match(20)
    last = None
    while not match.is_over:
        last = simulated_human(rng, last)
        r = match.play(last)
        print(
            f"Round {r.number}: Human={r.player_move.label} Bot={r.bot_move.label} "
            f"Result={r.outcome.value} predicted={r.prediction.move.label} ({r.prediction.confidence}%)"
        )
    s = match.summary()
    print(f"Final: human {s['player_score']} - bot {s['bot_score']} winner={s['winner']}")


if __name__ == "__main__":
    main()
