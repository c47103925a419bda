"""
Tools menu exposing the idle counter actions.
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMenu, QWidget

from idle_counter.actions import clear_idle_times, toggle_activity
from idle_counter.preference_store import PreferenceStore
from idle_counter.settings import IdleCounterSettings, IdleCounterSettingsManager

MENU_TITLE = "IdleTimeCounter"
CLEAR_ITEM_NAME = "Clear IdleTimes"
ACTIVE_ITEM_NAME = "Enabled"


class IdleCounterMenu(QObject):
    """Owns the menu and keeps the ``Enabled`` checkmark in sync with the settings."""

    activeToggled = Signal(bool)
    cleared = Signal()

    def __init__(
        self,
        store: PreferenceStore,
        settings: IdleCounterSettings,
        manager: IdleCounterSettingsManager,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__()
        self.store = store
        self.settings = settings
        self.manager = manager

        self.menu = QMenu(MENU_TITLE, parent)
        self.clear_action = QAction(CLEAR_ITEM_NAME, self.menu)
        self.active_action = QAction(ACTIVE_ITEM_NAME, self.menu)
        self.active_action.setCheckable(True)
        self.active_action.setChecked(settings.active)
        self.menu.addAction(self.clear_action)
        self.menu.addSeparator()
        self.menu.addAction(self.active_action)

        self.clear_action.triggered.connect(self._on_clear)
        self.active_action.triggered.connect(self._on_toggle)

    def _on_clear(self) -> None:
        clear_idle_times(self.store, self.settings.project_name)
        self.cleared.emit()

    def _on_toggle(self) -> None:
        active = toggle_activity(self.settings, self.manager)
        # QAction flips its own check state; keep it aligned with the stored flag.
        self.active_action.setChecked(active)
        self.activeToggled.emit(active)
