"""
Measures how long the developer waits for a compile and reload cycle.

The timer listens to the host's build events, stores the start timestamp
and compile duration in the preference store and adds every completed
cycle to the project's overall idle time.
"""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional, Set

from PySide6.QtCore import QObject, Signal, Slot

from idle_counter import logger as app_logger
from idle_counter.build_events import BuildEvents
from idle_counter.preference_store import PreferenceStore
from idle_counter.project_name import preference_key
from idle_counter.settings import IdleCounterSettings
from idle_counter.time_format import format_time

OVERALL_IDLE_TIME_KEY = "OverallIdleTime"
LAST_COMPILE_IDLE_TIME_KEY = "LastCompileIdleTime"
LAST_IDLE_START_TIME_KEY = "LastIdleStartTime"
COUNTER_KEYS = (OVERALL_IDLE_TIME_KEY, LAST_IDLE_START_TIME_KEY, LAST_COMPILE_IDLE_TIME_KEY)

# A start time this close to zero was never recorded.
_START_EPSILON = sys.float_info.epsilon

_PROCESS_START = time.monotonic()


def realtime_since_startup() -> float:
    """Seconds elapsed on a monotonic clock since this module was imported."""
    return time.monotonic() - _PROCESS_START


class IdleTimer(QObject):
    """
    One-shot observer of a single compile/reload cycle.

    Each slot disconnects itself the first time it fires, so a fresh
    :meth:`attach` is required for every cycle.
    """

    idleMeasured = Signal(float, float, float)

    def __init__(
        self,
        store: PreferenceStore,
        settings: IdleCounterSettings,
        *,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        super().__init__()
        self.store = store
        self.settings = settings
        self._clock: Callable[[], float] = clock or realtime_since_startup
        self._events: Optional[BuildEvents] = None
        self._connected: Set[str] = set()
        self._logger = app_logger.get_logger()

    def set_clock_provider(self, provider: Callable[[], float]) -> None:
        """
        Override the time source. Primarily used for testing.
        """
        self._clock = provider

    def attach(self, events: BuildEvents) -> bool:
        """Subscribe to ``events`` unless the counter is disabled."""
        if not self.settings.active:
            self._logger.debug("Idle counter disabled for {}; not subscribing.", self.settings.project_name)
            return False
        self.detach()
        self._events = events
        events.compilationStarted.connect(self.on_compilation_started)
        events.compilationFinished.connect(self.on_compilation_finished)
        events.afterAssemblyReload.connect(self.on_reload_finished)
        self._connected = {"compilationStarted", "compilationFinished", "afterAssemblyReload"}
        return True

    def detach(self) -> None:
        for name in list(self._connected):
            self._disconnect(name)

    @property
    def is_attached(self) -> bool:
        return bool(self._connected)

    @Slot(object)
    def on_compilation_started(self, context: object = None) -> None:
        self._disconnect("compilationStarted")
        if not self.settings.active:
            return

        self.store.set_float(self._key(LAST_IDLE_START_TIME_KEY), self._clock())

    @Slot(object)
    def on_compilation_finished(self, context: object = None) -> None:
        self._disconnect("compilationFinished")
        if not self.settings.active:
            return

        idle_start = self.store.get_float(self._key(LAST_IDLE_START_TIME_KEY))
        if abs(idle_start) < _START_EPSILON:
            self._logger.debug("Compilation finished without a recorded start; ignoring.")
            return

        self.store.set_float(self._key(LAST_COMPILE_IDLE_TIME_KEY), self._clock() - idle_start)

    @Slot()
    def on_reload_finished(self) -> None:
        self._disconnect("afterAssemblyReload")
        if not self.settings.active:
            return

        idle_start = self.store.get_float(self._key(LAST_IDLE_START_TIME_KEY))
        if abs(idle_start) < _START_EPSILON:
            self._logger.debug("Reload finished without a recorded start; ignoring.")
            return
        compile_idle = self.store.get_float(self._key(LAST_COMPILE_IDLE_TIME_KEY))
        idle = self._clock() - idle_start
        if idle < 0:
            # Start was recorded against another process's clock.
            self._logger.warning("Discarding idle cycle with negative duration {:.3f}s.", idle)
            self.store.delete_key(self._key(LAST_IDLE_START_TIME_KEY))
            self.store.delete_key(self._key(LAST_COMPILE_IDLE_TIME_KEY))
            return
        overall = self.store.get_float(self._key(OVERALL_IDLE_TIME_KEY)) + idle

        self._logger.info(
            "Your idle time was {} (CompileTime: {}). Your overall idle time on {} was {}",
            format_time(idle),
            format_time(compile_idle),
            self.settings.project_name,
            format_time(overall),
        )
        self.store.set_float(self._key(OVERALL_IDLE_TIME_KEY), overall)
        self.store.delete_key(self._key(LAST_IDLE_START_TIME_KEY))
        self.store.delete_key(self._key(LAST_COMPILE_IDLE_TIME_KEY))
        self.idleMeasured.emit(idle, compile_idle, overall)

    def _key(self, name: str) -> str:
        return preference_key(self.settings.project_name, name)

    def _disconnect(self, name: str) -> None:
        if name not in self._connected or self._events is None:
            return
        self._connected.discard(name)
        slot = {
            "compilationStarted": self.on_compilation_started,
            "compilationFinished": self.on_compilation_finished,
            "afterAssemblyReload": self.on_reload_finished,
        }[name]
        getattr(self._events, name).disconnect(slot)
