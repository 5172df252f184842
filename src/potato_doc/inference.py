"""HTTP client for the remote classification endpoint."""

# =============================================================================
# IMPORTS
# =============================================================================

import logging

import requests
from PySide6.QtCore import QObject, Signal, Slot

from potato_doc.types import InferenceResponse, SelectedFile

logger = logging.getLogger(__name__)

UPLOAD_FIELD = "file"


class InferenceError(RuntimeError):
    """Raised for any unsuccessful classification attempt."""


# =============================================================================
# CLIENT
# =============================================================================


class InferenceClient:
    """Uploads an image to the classification endpoint.

    A single ``requests.post`` is made per call and no session is shared, so
    overlapping workers never use the same connection pool. Only an HTTP 200
    whose JSON body holds a string ``prediction`` counts as success; network
    errors, other status codes and malformed bodies all raise
    ``InferenceError``.
    """

    def __init__(self, endpoint_url: str, timeout: float | None = None) -> None:
        self._endpoint_url = endpoint_url
        self._timeout = timeout

    @property
    def endpoint_url(self) -> str:
        return self._endpoint_url

    def classify(self, file: SelectedFile) -> InferenceResponse:
        files = {UPLOAD_FIELD: (file.name, file.data, file.mime_type)}
        logger.info("Uploading %s to %s", file.name, self._endpoint_url)

        try:
            response = requests.post(
                self._endpoint_url, files=files, timeout=self._timeout
            )
        except requests.RequestException as exc:
            raise InferenceError(
                f"Request to {self._endpoint_url} failed: {exc}"
            ) from exc

        if response.status_code != 200:
            raise InferenceError(
                f"Endpoint returned HTTP {response.status_code}: {response.text[:200]}"
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise InferenceError(f"Response body is not JSON: {exc}") from exc

        prediction = body.get("prediction") if isinstance(body, dict) else None
        if not isinstance(prediction, str):
            raise InferenceError(f"Response body has no prediction: {body!r}")

        logger.info("Endpoint classified %s as %s", file.name, prediction)
        return InferenceResponse(prediction=prediction)


# =============================================================================
# BACKGROUND WORKER
# =============================================================================


class ClassificationWorker(QObject):
    """Runs one classification request off the UI thread.

    The selection token travels with the outcome so the controller can
    tell which selection it belongs to.
    """

    finished = Signal(int, bool, str)  # token, success, prediction or failure detail

    def __init__(
        self, client: InferenceClient, file: SelectedFile, token: int
    ) -> None:
        super().__init__()
        self._client = client
        self._file = file
        self._token = token

    @property
    def token(self) -> int:
        return self._token

    @Slot()
    def run(self) -> None:
        try:
            response = self._client.classify(self._file)
        except InferenceError as exc:
            self.finished.emit(self._token, False, str(exc))
        except Exception as exc:
            logger.exception("Unexpected error while classifying %s", self._file.name)
            self.finished.emit(self._token, False, f"{type(exc).__name__}: {exc}")
        else:
            self.finished.emit(self._token, True, response.prediction)
