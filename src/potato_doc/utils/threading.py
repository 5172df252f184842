"""Utilities for running QObject workers in dedicated threads."""

# =============================================================================
# IMPORTS
# =============================================================================

import logging
from typing import Callable

from PySide6.QtCore import QObject, QThread

logger = logging.getLogger(__name__)


# =============================================================================
# WORKER HANDLE
# =============================================================================


class WorkerHandle:
    """Handle for a worker running inside its own QThread."""

    def __init__(self, thread: QThread, worker: QObject) -> None:
        self._thread = thread
        self._worker = worker

    @property
    def thread(self) -> QThread:
        return self._thread

    @property
    def worker(self) -> QObject:
        return self._worker

    def is_running(self) -> bool:
        try:
            return self._thread.isRunning()
        except RuntimeError:
            # Underlying QThread already deleted after finishing
            return False

    def wait(self, timeout_ms: int) -> bool:
        """Block up to ``timeout_ms`` for the thread to finish.

        A blocking HTTP call cannot be interrupted, so this never asks the
        thread to stop. Returns ``True`` once the thread is no longer running.
        """
        try:
            if not self._thread.isRunning():
                return True
            return self._thread.wait(max(timeout_ms, 0))
        except RuntimeError:
            # Underlying QThread already deleted after finishing
            return True


# =============================================================================
# WORKER MANAGEMENT FUNCTIONS
# =============================================================================


def start_worker(
    worker: QObject,
    start_method: str = "run",
    finished_callback: Callable[[], None] | None = None,
) -> WorkerHandle:
    """Move ``worker`` to a new ``QThread`` and start ``start_method``.

    Args:
        worker: The QObject worker to run in a separate thread
        start_method: Name of the method to call on the worker when starting
        finished_callback: Optional callback invoked when the thread finishes

    Returns:
        WorkerHandle: Handle for managing the worker and thread

    Raises:
        AttributeError: If the worker doesn't have the specified start_method
    """
    if not hasattr(worker, start_method):
        raise AttributeError(f"Worker {worker!r} has no method '{start_method}'")

    thread = QThread()
    worker.setParent(None)
    worker.moveToThread(thread)

    thread.started.connect(getattr(worker, start_method))  # type: ignore[arg-type]

    # Worker signals completion; the thread's event loop exits afterwards
    if hasattr(worker, "finished"):
        worker.finished.connect(thread.quit)  # type: ignore[attr-defined]

    thread.finished.connect(worker.deleteLater)
    thread.finished.connect(thread.deleteLater)
    if finished_callback is not None:
        thread.finished.connect(finished_callback)

    thread.start()
    logger.debug("Started worker %s in background thread", type(worker).__name__)
    return WorkerHandle(thread, worker)
