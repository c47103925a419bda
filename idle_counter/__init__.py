"""
Per-project idle time counter for compile and reload cycles.
"""

from .project_name import DataPathProjectNameResolver, FixedProjectNameResolver, ProjectNameError  # noqa: F401
from .time_format import format_time  # noqa: F401
