"""Correction telemetry recording and structured logging helpers."""

from __future__ import annotations

from collections import deque
from datetime import datetime, timezone
import logging
from typing import Any, Callable, Iterator

from pydantic import BaseModel, ConfigDict, Field

from .models import CorrectionResult


class CorrectionEvent(BaseModel):
    """Normalized record of a single correction request."""

    model_config = ConfigDict(extra="forbid")

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    device: str
    target_hex: str
    corrected_hex: str
    brightness: int
    category: str
    duration_ms: float
    cached: bool = False

    def summary(self) -> dict[str, Any]:
        """Return a compact summary suitable for structured logging."""

        return {
            "timestamp": self.timestamp.isoformat(),
            "device": self.device,
            "target": self.target_hex,
            "corrected": self.corrected_hex,
            "brightness": self.brightness,
            "category": self.category,
            "duration_ms": float(self.duration_ms),
        }


class CorrectionRecorder:
    """Ring buffer of the most recent correction events."""

    def __init__(
        self,
        *,
        max_events: int = 50,
        clock: Callable[[], datetime] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._events: deque[CorrectionEvent] = deque(maxlen=max(1, max_events))
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._logger = logger or logging.getLogger("ledcorrector.telemetry")
        self.total = 0

    def record(
        self,
        result: CorrectionResult,
        *,
        duration_ms: float,
        cached: bool = False,
    ) -> CorrectionEvent:
        """Append an event describing ``result``."""

        event = CorrectionEvent(
            device=result.device,
            target_hex=result.target_hex,
            corrected_hex=result.corrected_hex,
            brightness=result.brightness,
            category=result.category,
            duration_ms=float(duration_ms),
            cached=cached,
            timestamp=self._clock(),
        )
        self._events.append(event)
        self.total += 1
        self._emit_log(event)
        return event

    def iter_recent(self) -> Iterator[CorrectionEvent]:
        """Yield stored events from oldest to newest."""

        return iter(tuple(self._events))

    def as_dicts(self) -> list[dict]:
        return [event.model_dump(mode="json") for event in self._events]

    def clear(self) -> None:
        self._events.clear()

    def _emit_log(self, event: CorrectionEvent) -> None:
        if not self._logger:
            return

        try:
            self._logger.info(
                "ledcorrector.correction",
                extra={"ledcorrector_correction": event.summary()},
            )
        except Exception:  # pragma: no cover - logging failures should not break execution
            self._logger.debug("Failed to emit correction log", exc_info=True)
