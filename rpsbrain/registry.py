from __future__ import annotations

import logging
import time
import uuid
from collections import OrderedDict
from typing import Callable, Optional, Tuple

from .config import BrainConfig
from .core import GameBrain
from .errors import SessionNotFoundError
from .match import Match

logger = logging.getLogger(__name__)


class SessionRegistry:
    """In-memory matches keyed by session id. Nothing outlives the process.

    Sessions idle for longer than ``idle_ttl`` seconds expire, and once
    ``max_sessions`` are held the least recently used one is evicted.
    """

    def __init__(
        self,
        config: Optional[BrainConfig] = None,
        max_sessions: int = 1000,
        idle_ttl: Optional[float] = 3600.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_sessions <= 0:
            raise ValueError(f"max_sessions must be positive, got {max_sessions}")
        self.config = config or BrainConfig()
        self.max_sessions = max_sessions
        self.idle_ttl = idle_ttl
        self.clock = clock
        # sid -> (match, last access); oldest access first
        self._matches: "OrderedDict[str, Tuple[Match, float]]" = OrderedDict()

    def create(self, total_rounds: int) -> str:
        self.prune()
        match = Match(total_rounds, brain=GameBrain(self.config))
        while len(self._matches) >= self.max_sessions:
            old, _ = self._matches.popitem(last=False)
            logger.info("session %s evicted (limit %d)", old, self.max_sessions)
        sid = uuid.uuid4().hex
        self._matches[sid] = (match, self.clock())
        logger.info("session %s created (%d rounds)", sid, total_rounds)
        return sid

    def get(self, sid: str) -> Match:
        self.prune()
        try:
            match, _ = self._matches[sid]
        except KeyError:
            raise SessionNotFoundError(sid) from None
        self._matches[sid] = (match, self.clock())
        self._matches.move_to_end(sid)
        return match

    def drop(self, sid: str) -> None:
        if self._matches.pop(sid, None) is None:
            raise SessionNotFoundError(sid)
        logger.info("session %s dropped", sid)

    def prune(self) -> int:
        """Drop sessions idle past the TTL; returns how many were dropped."""
        if self.idle_ttl is None:
            return 0
        cutoff = self.clock() - self.idle_ttl
        expired = [sid for sid, (_, seen) in self._matches.items() if seen <= cutoff]
        for sid in expired:
            del self._matches[sid]
            logger.info("session %s expired", sid)
        return len(expired)

    def __contains__(self, sid: str) -> bool:
        return sid in self._matches

    def __len__(self) -> int:
        return len(self._matches)
