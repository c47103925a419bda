"""
Coordinator wiring the idle timer, its settings and the tools menu to a host.
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject
from PySide6.QtWidgets import QWidget

from idle_counter import logger as app_logger
from idle_counter.build_events import BuildEvents
from idle_counter.idle_timer import IdleTimer
from idle_counter.menu import IdleCounterMenu
from idle_counter.preference_store import PreferenceStore
from idle_counter.project_name import ProjectNameResolver, resolve_project_name_resolver
from idle_counter.settings import IdleCounterSettingsManager


class IdleCounterApp(QObject):
    """
    Owns one idle timer for the current project.

    Hosts call :meth:`start` once their build events exist and
    :meth:`reinitialize` whenever they reload, which re-arms the one-shot
    timer for the next cycle.
    """

    def __init__(
        self,
        events: BuildEvents,
        *,
        store: Optional[PreferenceStore] = None,
        resolver: Optional[ProjectNameResolver] = None,
    ) -> None:
        super().__init__()
        self._logger = app_logger.get_logger()
        self.events = events
        self.store = store or PreferenceStore()
        self.settings_manager = IdleCounterSettingsManager(self.store, resolver or resolve_project_name_resolver())
        self.settings = self.settings_manager.read_settings()
        self.timer = IdleTimer(self.store, self.settings)
        self._menu: Optional[IdleCounterMenu] = None

    def start(self) -> None:
        if self.timer.attach(self.events):
            self._logger.info(
                "Idle counter watching {} (preferences at {}).",
                self.settings.project_name,
                self.store.location,
            )

    def reinitialize(self) -> None:
        self.start()

    def shutdown(self) -> None:
        self.timer.detach()

    def build_menu(self, parent: Optional[QWidget] = None) -> IdleCounterMenu:
        if self._menu is None:
            self._menu = IdleCounterMenu(self.store, self.settings, self.settings_manager, parent)
            self._menu.activeToggled.connect(self._on_active_toggled)
        return self._menu

    def _on_active_toggled(self, active: bool) -> None:
        if active:
            self.start()
        else:
            self._logger.info("Idle counter disabled for {}.", self.settings.project_name)
            self.timer.detach()
