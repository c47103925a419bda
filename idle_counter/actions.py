"""
User-invocable idle counter actions shared by the menu and the CLI.
"""

from __future__ import annotations

from idle_counter import logger as app_logger
from idle_counter.idle_timer import COUNTER_KEYS
from idle_counter.preference_store import PreferenceStore
from idle_counter.project_name import preference_key
from idle_counter.settings import IdleCounterSettings, IdleCounterSettingsManager

_LOGGER = app_logger.get_logger()


def clear_idle_times(store: PreferenceStore, project: str) -> None:
    """Delete every idle counter stored for ``project``."""
    for name in COUNTER_KEYS:
        store.delete_key(preference_key(project, name))
    _LOGGER.info("Cleared idle times for {}.", project)


def toggle_activity(settings: IdleCounterSettings, manager: IdleCounterSettingsManager) -> bool:
    """Flip and persist the active flag, returning the new state."""
    settings.active = not settings.active
    manager.write_active(settings.active)
    return settings.active
