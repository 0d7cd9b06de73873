"""In-memory telemetry for mini-game usage events."""

import logging
import time
import uuid
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Dict, List, Optional

import config

logger = logging.getLogger(__name__)


@dataclass
class TelemetryEvent:
    type: str
    data: Dict[str, Any]
    session_id: str
    timestamp: float = field(default_factory=time.time)


class Telemetry:
    """Keeps the most recent usage events in a bounded buffer."""

    def __init__(self, enabled: Optional[bool] = None, max_events: int = config.TELEMETRY_MAX_EVENTS):
        self.enabled = config.TELEMETRY_ENABLED if enabled is None else enabled
        self.session_id = f"tel_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"
        self._events: Deque[TelemetryEvent] = deque(maxlen=max_events)

    def log(self, event_type: str, data: Dict[str, Any]):
        """Record an event; dropped when telemetry is disabled."""
        if not self.enabled:
            return

        event = TelemetryEvent(type=event_type, data=dict(data), session_id=self.session_id)
        self._events.append(event)
        logger.debug("telemetry [%s] %s", event_type, event.data)

    def events(self, event_type: Optional[str] = None) -> List[TelemetryEvent]:
        if event_type is None:
            return list(self._events)
        return [e for e in self._events if e.type == event_type]

    def actions(self) -> List[str]:
        """The 'action' field of every feature_usage event, oldest first."""
        return [e.data.get('action') for e in self._events if e.type == 'feature_usage']
