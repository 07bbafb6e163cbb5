"""
Toast notification queue.

One queue is owned by each application instance (``app.state.toasts``).
Every toast gets its own expiry timer; removing a toast cancels it.
"""

import asyncio
import itertools
import logging
import time
from typing import Callable, Dict, List, Optional

from app.schemas.notifications import Toast, ToastType

logger = logging.getLogger(__name__)


class ToastQueue:
    def __init__(self, duration: float = 5.0, clock: Callable[[], float] = time.time):
        self.duration = duration
        self._clock = clock
        self._toasts: Dict[str, Toast] = {}
        self._timers: Dict[str, asyncio.TimerHandle] = {}
        self._seq = itertools.count(1)

    def __len__(self) -> int:
        return len(self._toasts)

    def active(self) -> List[Toast]:
        return list(self._toasts.values())

    def add(self, message: str, type: ToastType = "info") -> Toast:
        now = self._clock()
        toast_id = f"{int(now * 1000)}-{next(self._seq)}"
        toast = Toast(id=toast_id, message=message, type=type, created_at=now)
        self._toasts[toast_id] = toast
        self._schedule(toast_id)
        logger.debug("Toast %s queued (%s): %s", toast_id, type, message)
        return toast

    def remove(self, toast_id: str) -> bool:
        timer = self._timers.pop(toast_id, None)
        if timer is not None:
            timer.cancel()
        return self._toasts.pop(toast_id, None) is not None

    def expire(self, now: Optional[float] = None) -> List[str]:
        """Drop toasts older than ``duration``; returns the expired ids."""
        now = self._clock() if now is None else now
        expired = [
            toast_id for toast_id, toast in self._toasts.items()
            if now - toast.created_at >= self.duration
        ]
        for toast_id in expired:
            self.remove(toast_id)
        return expired

    def clear(self) -> None:
        for timer in self._timers.values():
            timer.cancel()
        self._timers.clear()
        self._toasts.clear()

    def _schedule(self, toast_id: str) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No event loop: entries are dropped lazily by expire()
            return
        self._timers[toast_id] = loop.call_later(self.duration, self.remove, toast_id)
