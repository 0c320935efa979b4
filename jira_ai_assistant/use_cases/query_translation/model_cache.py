from __future__ import annotations

import threading
import time
from typing import Callable
from typing import Optional

from jira_ai_assistant import LOGGER
from jira_ai_assistant.use_cases.interfaces.llm_interface import GenerativeModelInterface

SECONDS_PER_HOUR = 3600


class ModelHandleCache:
    """Holds one model handle bound to fixed system instructions.

    The handle is built lazily and rebuilt once it is older than ``expiry_hours``.
    Expiry is checked when the handle is requested; there is no background timer.
    """

    def __init__(
        self,
        factory: Callable[[], GenerativeModelInterface],
        expiry_hours: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._factory = factory
        self._expiry_seconds = expiry_hours * SECONDS_PER_HOUR
        self._clock = clock
        self._lock = threading.Lock()
        self._handle: Optional[GenerativeModelInterface] = None
        self._created_at = 0.0

    @property
    def is_active(self) -> bool:
        with self._lock:
            return self._handle is not None and not self._is_expired(self._clock())

    def age_hours(self) -> float:
        with self._lock:
            if self._handle is None:
                return 0.0
            return (self._clock() - self._created_at) / SECONDS_PER_HOUR

    def _is_expired(self, now: float) -> bool:
        return now - self._created_at >= self._expiry_seconds

    def get(self) -> GenerativeModelInterface:
        """Return the cached handle, building or refreshing it when needed.

        Raises:
            Exception: Whatever the factory raises; the cache stays empty in that case.
        """
        with self._lock:
            now = self._clock()
            if self._handle is not None and not self._is_expired(now):
                return self._handle

            action = "Creating" if self._handle is None else "Refreshing"
            LOGGER.info(f"{action} cached model handle")
            self._handle = None
            handle = self._factory()
            self._handle = handle
            self._created_at = now
            return handle

    def invalidate(self) -> None:
        with self._lock:
            self._handle = None
            self._created_at = 0.0
        LOGGER.info("Model cache invalidated, next query builds a fresh handle")
