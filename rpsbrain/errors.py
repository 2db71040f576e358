from __future__ import annotations


class RPSBrainError(Exception):
    """Base class for errors raised by rpsbrain."""


class InvalidMoveError(RPSBrainError, ValueError):
    def __init__(self, value: object):
        super().__init__(f"invalid move: {value!r} (expected rock, paper or scissors)")
        self.value = value


class MatchOverError(RPSBrainError):
    def __init__(self, total_rounds: int):
        super().__init__(f"match already finished after {total_rounds} rounds")
        self.total_rounds = total_rounds


class SessionNotFoundError(RPSBrainError, KeyError):
    def __init__(self, session_id: str):
        super().__init__(session_id)
        self.session_id = session_id

    def __str__(self) -> str:
        return f"unknown session: {self.session_id}"
