"""
Persistence layer for idle counters using Qt's per-user settings store.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QSettings

from idle_counter import logger as app_logger

ORGANIZATION_NAME = "IdleCounter"
APPLICATION_NAME = "IdleCounter"

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


class PreferenceStore:
    """
    Thin wrapper over QSettings exposing flat float and bool preferences.

    Without arguments the native per-user store is used (registry on
    Windows, plist on macOS, INI elsewhere). ``settings_file`` selects an
    explicit INI file instead.
    """

    def __init__(
        self,
        *,
        settings_file: Optional[Union[str, Path]] = None,
        settings: Optional[QSettings] = None,
    ) -> None:
        if settings is not None:
            self._settings = settings
        elif settings_file is not None:
            self._settings = QSettings(str(settings_file), QSettings.Format.IniFormat)
        else:
            self._settings = QSettings(ORGANIZATION_NAME, APPLICATION_NAME)
        self._logger = app_logger.get_logger()

    @property
    def location(self) -> str:
        return self._settings.fileName()

    def has_key(self, key: str) -> bool:
        return bool(self._settings.contains(key))

    def get_float(self, key: str, default: float = 0.0) -> float:
        raw = self._settings.value(key)
        if raw is None:
            return default
        try:
            value = float(raw)
        except (TypeError, ValueError):
            value = math.nan
        if not math.isfinite(value):
            self._logger.warning("Preference {} holds invalid number {!r}; using {}.", key, raw, default)
            return default
        return value

    def set_float(self, key: str, value: float) -> None:
        self._settings.setValue(key, float(value))
        self._settings.sync()

    def get_bool(self, key: str, default: bool = False) -> bool:
        raw = self._settings.value(key)
        if raw is None:
            return default
        if isinstance(raw, bool):
            return raw
        text = str(raw).strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        self._logger.warning("Preference {} holds non-boolean value {!r}; using {}.", key, raw, default)
        return default

    def set_bool(self, key: str, value: bool) -> None:
        self._settings.setValue(key, bool(value))
        self._settings.sync()

    def delete_key(self, key: str) -> None:
        self._settings.remove(key)
        self._settings.sync()
