"""Utility helpers shared across Potato Doc modules."""

from potato_doc.utils.threading import WorkerHandle, start_worker

__all__ = ["start_worker", "WorkerHandle"]
