"""Preview images for selected files and their lifecycle."""

# =============================================================================
# IMPORTS
# =============================================================================

import itertools
import logging

from PySide6.QtGui import QImage

from potato_doc.types import PreviewHandle, SelectedFile

logger = logging.getLogger(__name__)


# =============================================================================
# PREVIEW GENERATOR
# =============================================================================


class PreviewGenerator:
    """Creates preview handles and frees them exactly once.

    Every handle stays registered until it is released, so ``live_count``
    reports how many decoded images are still held.
    """

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._live: dict[int, QImage] = {}

    @property
    def live_count(self) -> int:
        return len(self._live)

    def is_live(self, handle: PreviewHandle) -> bool:
        return handle.handle_id in self._live

    def create_preview(self, file: SelectedFile) -> PreviewHandle:
        """Decode ``file`` into a displayable image.

        Undecodable data yields a null image rather than an error.
        """
        image = QImage.fromData(file.data)
        if image.isNull():
            logger.warning("Could not decode preview for %s", file.name)

        handle = PreviewHandle(
            handle_id=next(self._ids), file_name=file.name, image=image
        )
        self._live[handle.handle_id] = image
        logger.debug("Created preview %d for %s", handle.handle_id, file.name)
        return handle

    def release(self, handle: PreviewHandle | None) -> bool:
        """Free the image behind ``handle``.

        Returns:
            True if the handle was live, False if it was already released
        """
        if handle is None:
            return False
        if self._live.pop(handle.handle_id, None) is None:
            logger.debug("Preview %d already released", handle.handle_id)
            return False
        logger.debug("Released preview %d", handle.handle_id)
        return True

    def release_all(self) -> None:
        if self._live:
            logger.debug("Releasing %d remaining previews", len(self._live))
        self._live.clear()
