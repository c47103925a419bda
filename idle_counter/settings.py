"""
Preference-backed configuration for the idle counter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from idle_counter import logger as app_logger
from idle_counter.preference_store import PreferenceStore
from idle_counter.project_name import ProjectNameResolver, preference_key

_LOGGER = app_logger.get_logger()

ACTIVE_KEY = "Active"


@dataclass(eq=True)
class IdleCounterSettings:
    project_name: str
    active: bool = True


class IdleCounterSettingsManager:
    """Loads and persists the per-project active flag."""

    def __init__(self, store: PreferenceStore, resolver: ProjectNameResolver) -> None:
        self.store = store
        self.resolver = resolver
        self._project_name: Optional[str] = None

    @property
    def project_name(self) -> str:
        # Resolved once; reads and writes share one project.
        if self._project_name is None:
            self._project_name = self.resolver()
        return self._project_name

    def read_settings(self) -> IdleCounterSettings:
        project = self.project_name
        active = self.store.get_bool(preference_key(project, ACTIVE_KEY), True)
        return IdleCounterSettings(project_name=project, active=active)

    def write_active(self, active: bool) -> None:
        project = self.project_name
        self.store.set_bool(preference_key(project, ACTIVE_KEY), active)
        _LOGGER.debug("Idle counter for {} {}.", project, "enabled" if active else "disabled")
