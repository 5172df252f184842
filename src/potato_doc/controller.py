"""Analysis state machine driving upload, preview and classification."""

# =============================================================================
# IMPORTS
# =============================================================================

import itertools
import logging
import time
from typing import Callable

from PySide6.QtCore import QObject, Signal, Slot

from potato_doc.inference import ClassificationWorker, InferenceClient
from potato_doc.preview import PreviewGenerator
from potato_doc.types import (
    AnalysisError,
    AnalysisResult,
    AnalysisView,
    PreviewHandle,
    SelectedFile,
)
from potato_doc.utils import WorkerHandle, start_worker

logger = logging.getLogger(__name__)

Dispatcher = Callable[[ClassificationWorker, Callable[[], None]], WorkerHandle | None]


def _start_in_thread(
    worker: ClassificationWorker, on_thread_finished: Callable[[], None]
) -> WorkerHandle:
    return start_worker(
        worker, start_method="run", finished_callback=on_thread_finished
    )


# =============================================================================
# ANALYSIS CONTROLLER
# =============================================================================


class AnalysisController(QObject):
    """Owns the current analysis slot and its transitions.

    States are ``idle -> analyzing -> {result | error}``. A new selection
    from any state starts a fresh analysis; ``reset`` returns to idle.

    Each selection gets a new token. A classification outcome is applied
    only if its token still matches the current selection, so a late
    response for a superseded file never overwrites a newer one. Superseded
    requests are not cancelled.
    """

    # ------------------------------------------------------------------------
    # SIGNALS
    # ------------------------------------------------------------------------
    state_changed = Signal(object)  # AnalysisView
    analysis_started = Signal()
    analysis_finished = Signal(bool, str)  # success, condition or user message

    # ------------------------------------------------------------------------
    # INITIALIZATION
    # ------------------------------------------------------------------------
    def __init__(
        self,
        client: InferenceClient,
        previews: PreviewGenerator | None = None,
        dispatch: Dispatcher | None = None,
        parent: QObject | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            client: Client used for every classification request
            previews: Preview generator owning preview resources
            dispatch: Starts a worker and calls the given callback once its
                thread has finished. Defaults to a dedicated ``QThread``.
            parent: Parent QObject
        """
        super().__init__(parent)
        self._client = client
        self._previews = previews or PreviewGenerator()
        self._dispatch = dispatch or _start_in_thread
        self._tokens = itertools.count(1)
        self._workers: dict[int, WorkerHandle] = {}

        self._token = 0
        self._file: SelectedFile | None = None
        self._preview: PreviewHandle | None = None
        self._in_flight = False
        self._result: AnalysisResult | None = None
        self._error: AnalysisError | None = None

    # ------------------------------------------------------------------------
    # READ-ONLY STATE
    # ------------------------------------------------------------------------
    @property
    def selection_token(self) -> int:
        return self._token

    @property
    def is_analyzing(self) -> bool:
        return self._in_flight

    @property
    def previews(self) -> PreviewGenerator:
        return self._previews

    def snapshot(self) -> AnalysisView:
        """Derive the current view from the analysis slot."""
        if self._file is None:
            return AnalysisView.idle()
        if self._error is not None:
            return AnalysisView.from_error(self._error, self._preview)
        if self._result is not None:
            return AnalysisView.from_result(self._result, self._preview)
        return AnalysisView.analyzing(self._preview)

    # ------------------------------------------------------------------------
    # ACTIONS
    # ------------------------------------------------------------------------
    @Slot(object)
    def select_file(self, file: SelectedFile | None) -> None:
        """Start analysing ``file``, superseding whatever came before."""
        if file is None or not file.is_image:
            logger.debug("Ignoring selection without an image file")
            return

        previous_preview = self._preview
        self._token = next(self._tokens)
        self._file = file
        self._preview = self._previews.create_preview(file)
        self._previews.release(previous_preview)
        self._result = None
        self._error = None
        self._in_flight = True

        logger.info("Analysing %s (selection %d)", file.name, self._token)
        self._emit_state()
        self.analysis_started.emit()
        self._start_classification(file, self._token)

    @Slot()
    def reset(self) -> None:
        """Return to idle, freeing the preview of the current selection."""
        if self._file is None:
            logger.debug("Reset requested while idle")
            return

        if self._in_flight:
            logger.info(
                "Reset while selection %d is pending; its outcome will be ignored",
                self._token,
            )

        # Invalidate any pending outcome
        self._token = next(self._tokens)
        self._previews.release(self._preview)
        self._file = None
        self._preview = None
        self._result = None
        self._error = None
        self._in_flight = False

        logger.info("Analysis reset")
        self._emit_state()

    def shutdown(self) -> None:
        """Release every resource on teardown without blocking.

        Pending outcomes are ignored from here on and no state is emitted.
        Worker threads still inside a request keep running; their handles
        stay registered until they finish, see ``wait_for_workers``.
        """
        self._token = next(self._tokens)
        for handle in list(self._workers.values()):
            try:
                handle.worker.finished.disconnect(self._on_classification_finished)
            except (RuntimeError, TypeError):
                # Worker already deleted or never connected
                pass

        self._previews.release(self._preview)
        self._previews.release_all()
        self._file = None
        self._preview = None
        self._result = None
        self._error = None
        self._in_flight = False

    def wait_for_workers(self, timeout_ms: int) -> bool:
        """Wait up to ``timeout_ms`` in total for every worker thread.

        Returns ``True`` when no worker thread is left running.
        """
        deadline = time.monotonic() + timeout_ms / 1000
        for handle in list(self._workers.values()):
            remaining_ms = int((deadline - time.monotonic()) * 1000)
            if not handle.wait(remaining_ms):
                logger.warning(
                    "%d worker thread(s) still running after %d ms",
                    sum(1 for h in self._workers.values() if h.is_running()),
                    timeout_ms,
                )
                return False
        return True

    # ------------------------------------------------------------------------
    # CLASSIFICATION
    # ------------------------------------------------------------------------
    def _start_classification(self, file: SelectedFile, token: int) -> None:
        worker = ClassificationWorker(self._client, file, token)
        worker.finished.connect(self._on_classification_finished)

        handle = self._dispatch(worker, lambda: self._workers.pop(token, None))
        if handle is not None:
            self._workers[token] = handle

    @Slot(int, bool, str)
    def _on_classification_finished(
        self, token: int, success: bool, payload: str
    ) -> None:
        if token != self._token:
            logger.debug(
                "Discarding stale outcome of selection %d (current %d)",
                token,
                self._token,
            )
            return

        self._in_flight = False
        if success:
            self._result = AnalysisResult(condition=payload)
            logger.info("Selection %d classified as %s", token, payload)
            self._emit_state()
            self.analysis_finished.emit(True, payload)
        else:
            self._error = AnalysisError()
            logger.warning("Classification of selection %d failed: %s", token, payload)
            self._emit_state()
            self.analysis_finished.emit(False, self._error.message)

    def _emit_state(self) -> None:
        self.state_changed.emit(self.snapshot())
