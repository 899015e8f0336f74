import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class MessageLogEntry:
    """One inbound (`from_id` set) or outbound (`to_id` set) message."""

    body: str
    from_id: Optional[str] = None
    to_id: Optional[str] = None
    timestamp: datetime = field(default_factory=_now)

    @classmethod
    def inbound(cls, from_id: str, body: str) -> "MessageLogEntry":
        return cls(body=body, from_id=from_id)

    @classmethod
    def outbound(cls, to_id: str, body: str) -> "MessageLogEntry":
        return cls(body=body, to_id=to_id)

    @property
    def direction(self) -> str:
        return "inbound" if self.from_id is not None else "outbound"

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"ts": int(self.timestamp.timestamp() * 1000)}
        if self.from_id is not None:
            data["from"] = self.from_id
        if self.to_id is not None:
            data["to"] = self.to_id
        data["body"] = self.body
        return data


class MessageLog:
    """Append-only, in-memory record of message traffic."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: List[MessageLogEntry] = []

    def append(self, entry: MessageLogEntry) -> None:
        with self._lock:
            self._entries.append(entry)

    def recent(self, limit: int = 200) -> List[MessageLogEntry]:
        """Last `limit` entries, oldest first."""
        if limit <= 0:
            return []
        with self._lock:
            return self._entries[-limit:]

    def all(self) -> List[MessageLogEntry]:
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
