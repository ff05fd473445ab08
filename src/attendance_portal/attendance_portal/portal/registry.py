from __future__ import annotations

import itertools
import secrets
import threading
from collections import OrderedDict
from typing import Optional

from ..core.constants import DEFAULT_SESSION_LIMIT
from .state import PortalSession


class SessionRegistry:
    """Process-local map of browser session token -> logged-in PortalSession.

    Only sessions that reached the dashboard are kept. Logout removes the
    entry, and the least recently used entry is evicted past `max_sessions`.
    Epochs come from one counter, so a new session never reuses the epoch of
    an earlier one.
    """

    def __init__(self, max_sessions: int = DEFAULT_SESSION_LIMIT):
        if max_sessions <= 0:
            raise ValueError(f"max_sessions must be positive, got {max_sessions}")
        self._max_sessions = int(max_sessions)
        self._sessions: "OrderedDict[str, PortalSession]" = OrderedDict()
        self._epochs = itertools.count()
        self._lock = threading.Lock()

    def new_session(self) -> PortalSession:
        """A detached session, not stored until `add` is called."""
        with self._lock:
            return PortalSession(epoch=next(self._epochs))

    def get(self, token: Optional[str]) -> Optional[PortalSession]:
        if not token:
            return None
        with self._lock:
            ps = self._sessions.get(token)
            if ps is not None:
                self._sessions.move_to_end(token)
            return ps

    def add(self, session: PortalSession) -> str:
        token = secrets.token_urlsafe(24)
        with self._lock:
            self._sessions[token] = session
            while len(self._sessions) > self._max_sessions:
                self._sessions.popitem(last=False)
        return token

    def discard(self, token: Optional[str]) -> None:
        if not token:
            return
        with self._lock:
            self._sessions.pop(token, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
