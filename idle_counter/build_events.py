"""
Lifecycle notifications published by the host build system.
"""

from __future__ import annotations

from PySide6.QtCore import QObject, Signal


class BuildEvents(QObject):
    """
    Signals a host emits around its compile and reload cycle.

    ``compilationStarted`` and ``compilationFinished`` carry an opaque
    context object supplied by the host; ``afterAssemblyReload`` carries
    nothing.
    """

    compilationStarted = Signal(object)
    compilationFinished = Signal(object)
    afterAssemblyReload = Signal()

    def start_compilation(self, context: object = None) -> None:
        self.compilationStarted.emit(context)

    def finish_compilation(self, context: object = None) -> None:
        self.compilationFinished.emit(context)

    def finish_reload(self) -> None:
        self.afterAssemblyReload.emit()
