"""Obtain a single image file from the picker or a drag-and-drop."""

# =============================================================================
# IMPORTS
# =============================================================================

import logging
from collections.abc import Sequence
from pathlib import Path

from PySide6.QtCore import QMimeDatabase, QObject, Signal

from potato_doc.types import SelectedFile

logger = logging.getLogger(__name__)

IMAGE_NAME_FILTER = "Images (*.png *.jpg *.jpeg *.bmp *.gif *.webp *.tif *.tiff)"


# =============================================================================
# HELPERS
# =============================================================================


def read_selected_file(path: Path | str) -> SelectedFile | None:
    """Read ``path`` from disk into a ``SelectedFile``.

    The MIME type is resolved from the file name and contents. Returns None
    when the file cannot be read.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        logger.warning("Could not read selected file %s: %s", path, exc)
        return None

    mime_type = QMimeDatabase().mimeTypeForFile(str(path)).name()
    return SelectedFile(name=path.name, data=data, mime_type=mime_type)


# =============================================================================
# FILE ACQUISITION
# =============================================================================


class FileAcquisition(QObject):
    """Turns picker choices and drops into ``file_selected`` events.

    Only image files are accepted. Anything else, including an empty
    selection, is ignored without feedback and leaves the state unchanged.
    """

    # ------------------------------------------------------------------------
    # SIGNALS
    # ------------------------------------------------------------------------
    file_selected = Signal(object)  # SelectedFile
    drag_active_changed = Signal(bool)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._drag_active = False

    @property
    def drag_active(self) -> bool:
        return self._drag_active

    # ------------------------------------------------------------------------
    # SELECTION
    # ------------------------------------------------------------------------
    def select_via_picker(self, path: Path | str | None) -> SelectedFile | None:
        """Accept the file chosen in the picker dialog.

        Args:
            path: Chosen path; empty or None when the dialog was cancelled

        Returns:
            The accepted file, or None if nothing was accepted
        """
        if not path:
            logger.debug("Picker closed without a selection")
            return None
        return self._accept(read_selected_file(path))

    def select_via_drop(self, paths: Sequence[Path | str]) -> SelectedFile | None:
        """Accept the first of the dropped files.

        Args:
            paths: Local paths of the dropped items, in drop order

        Returns:
            The accepted file, or None if nothing was accepted
        """
        self._set_drag_active(False)
        if not paths:
            logger.debug("Drop carried no files")
            return None
        if len(paths) > 1:
            logger.debug("Ignoring %d extra dropped files", len(paths) - 1)
        return self._accept(read_selected_file(paths[0]))

    def _accept(self, selected: SelectedFile | None) -> SelectedFile | None:
        if selected is None:
            return None
        if not selected.is_image:
            logger.debug(
                "Rejected %s: unsupported type %s", selected.name, selected.mime_type
            )
            return None

        logger.info("Selected %s (%s)", selected.name, selected.mime_type)
        self.file_selected.emit(selected)
        return selected

    # ------------------------------------------------------------------------
    # DRAG STATE
    # ------------------------------------------------------------------------
    def drag_entered(self) -> None:
        self._set_drag_active(True)

    def drag_moved(self) -> None:
        self._set_drag_active(True)

    def drag_left(self) -> None:
        self._set_drag_active(False)

    def _set_drag_active(self, active: bool) -> None:
        if active == self._drag_active:
            return
        self._drag_active = active
        self.drag_active_changed.emit(active)
