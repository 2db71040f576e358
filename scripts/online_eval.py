import json
import random
from typing import Dict

from rpsbrain import GameBrain, Move, Outcome


def human_move(style: str, t: int, rng: random.Random) -> Move:
    if style == "sticky":
        return Move.ROCK if rng.random() < 0.6 else rng.choice(list(Move))
    elif style == "cycle":
        return Move(t % 3)
    elif style == "alternate":
        return (Move.PAPER, Move.SCISSORS)[t % 2]
    else:  # random
        return rng.choice(list(Move))


def simulate_session(brain: GameBrain, style: str, n_rounds: int = 200, seed: int = 0) -> Dict:
    rng = random.Random(seed)
    bot_wins = player_wins = 0
    for t in range(n_rounds):
        ai = brain.choose_opponent_move()
        hm = human_move(style, t, rng)
        brain.record_player_move(hm)
        res = brain.resolve_round(hm, ai)
        if res is Outcome.LOSE:
            bot_wins += 1
        elif res is Outcome.WIN:
            player_wins += 1
    decided = max(1, bot_wins + player_wins)
    return {"bot_win_rate": bot_wins / n_rounds, "bot_share_of_decided": bot_wins / decided}


def run():
    out = {}
    for style in ("sticky", "cycle", "alternate", "random"):
        out[style] = simulate_session(GameBrain(seed=42), style)
    print(json.dumps(out, indent=2))


if __name__ == "__main__":
    run()
