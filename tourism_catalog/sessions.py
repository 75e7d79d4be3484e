from __future__ import annotations

import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict

from tourism_catalog.browse.tab_controller import TabController


class BrowseSession(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    session_id: str
    created_at: datetime
    last_seen_at: datetime
    controller: TabController


class SessionStore:
    def __init__(self, max_sessions: int = 1000) -> None:
        self._sessions: dict[str, BrowseSession] = {}
        self._max_sessions = max_sessions

    def __len__(self) -> int:
        return len(self._sessions)

    def _evict(self) -> None:
        if len(self._sessions) <= self._max_sessions:
            return
        # Drop the sessions idle the longest
        candidates = sorted(self._sessions.values(), key=lambda s: s.last_seen_at)
        while len(self._sessions) > self._max_sessions and candidates:
            self._sessions.pop(candidates.pop(0).session_id, None)

    def create_session(self, controller: TabController) -> BrowseSession:
        now = datetime.now(timezone.utc)
        session = BrowseSession(
            session_id=uuid.uuid4().hex[:12],
            created_at=now,
            last_seen_at=now,
            controller=controller,
        )
        self._sessions[session.session_id] = session
        self._evict()
        return session

    def get_session(self, session_id: str) -> BrowseSession | None:
        if session := self._sessions.get(session_id):
            session.last_seen_at = datetime.now(timezone.utc)
        return session

    def delete_session(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None
