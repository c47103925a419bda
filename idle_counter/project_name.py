"""
Project identifier resolution.

Every preference key is prefixed with the project name so that several
projects can share one per-user store.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable

ProjectNameResolver = Callable[[], str]

DEFAULT_DATA_FOLDER = "Assets"


class ProjectNameError(ValueError):
    """Raised when no project name can be derived."""


@dataclass(frozen=True)
class DataPathProjectNameResolver:
    """
    Derive the project name from the application's data path.

    The project folder is assumed to be the parent of the data folder, e.g.
    ``/Projects/Unity/AwesomeProject/Assets`` resolves to ``AwesomeProject``.
    Projects laid out at a different depth resolve to the wrong folder, so
    hosts that know their project name should use
    :class:`FixedProjectNameResolver` instead.
    """

    data_path: str
    separator: str = os.sep

    def __call__(self) -> str:
        tokens = self.data_path.rstrip(self.separator).split(self.separator)
        if len(tokens) < 2 or not tokens[-2]:
            raise ProjectNameError(f"Cannot derive a project name from data path {self.data_path!r}")
        return tokens[-2]


@dataclass(frozen=True)
class FixedProjectNameResolver:
    """Return an explicitly configured project name."""

    name: str

    def __call__(self) -> str:
        if not self.name:
            raise ProjectNameError("Project name must not be empty.")
        return self.name


def preference_key(project: str, name: str) -> str:
    """Build the store key for ``name`` within ``project``."""
    return f"{project}_{name}"


def resolve_project_name_resolver(
    *,
    project: str | None = None,
    data_path: str | None = None,
) -> ProjectNameResolver:
    """
    Pick a resolver from explicit arguments, then the environment.

    ``IDLE_COUNTER_PROJECT`` names the project directly and
    ``IDLE_COUNTER_DATA_PATH`` supplies a data path. Without either, the
    current directory is treated as the project folder.
    """
    project = project or os.environ.get("IDLE_COUNTER_PROJECT")
    if project:
        return FixedProjectNameResolver(project)
    data_path = data_path or os.environ.get("IDLE_COUNTER_DATA_PATH")
    if data_path:
        return DataPathProjectNameResolver(data_path)
    return DataPathProjectNameResolver(os.path.join(os.getcwd(), DEFAULT_DATA_FOLDER))
