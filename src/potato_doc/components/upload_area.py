"""Click-or-drop target showing the selected leaf image."""

# =============================================================================
# IMPORTS
# =============================================================================

import logging

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import (
    QDragEnterEvent,
    QDragLeaveEvent,
    QDragMoveEvent,
    QDropEvent,
    QMouseEvent,
    QPixmap,
    QResizeEvent,
)
from PySide6.QtWidgets import QFileDialog, QFrame, QLabel, QVBoxLayout, QWidget

from potato_doc.acquisition import IMAGE_NAME_FILTER, FileAcquisition
from potato_doc.config import DEFAULT_DIR
from potato_doc.types import PreviewHandle

logger = logging.getLogger(__name__)

PROMPT_TEXT = "Drag & drop a leaf image or browse"


def ask_for_image_path(parent: QWidget) -> str:
    """Open the image picker dialog; empty string when cancelled."""
    path, _ = QFileDialog.getOpenFileName(
        parent,
        "Select Leaf Image",
        DEFAULT_DIR,
        IMAGE_NAME_FILTER,
    )
    return path


# =============================================================================
# UPLOAD AREA
# =============================================================================


class UploadArea(QFrame):
    """Drop target that opens the picker when clicked with no image shown.

    Drag and drop events are forwarded to ``FileAcquisition``; the
    ``dragActive`` dynamic property mirrors its drag state for styling.
    """

    def __init__(
        self, acquisition: FileAcquisition, parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self._acquisition = acquisition
        self._preview: PreviewHandle | None = None
        self._build_ui()
        self._connect_signals()

    # ------------------------------------------------------------------------
    # UI CONSTRUCTION
    # ------------------------------------------------------------------------
    def _build_ui(self) -> None:
        self.setObjectName("uploadArea")
        self.setAcceptDrops(True)
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self.setMinimumHeight(280)
        self.setProperty("dragActive", False)

        layout = QVBoxLayout(self)
        self._image_label = QLabel(PROMPT_TEXT)
        self._image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._image_label.setWordWrap(True)
        layout.addWidget(self._image_label)

    def _connect_signals(self) -> None:
        self._acquisition.drag_active_changed.connect(self._on_drag_active_changed)

    # ------------------------------------------------------------------------
    # PUBLIC API
    # ------------------------------------------------------------------------
    def set_preview(self, preview: PreviewHandle | None) -> None:
        """Show ``preview``, or the upload prompt when None."""
        if preview is self._preview:
            return
        self._preview = preview
        if preview is None:
            self._image_label.setPixmap(QPixmap())
            self._image_label.setText(PROMPT_TEXT)
            self.setCursor(Qt.CursorShape.PointingHandCursor)
        else:
            self.unsetCursor()
            self._render_preview()

    def open_picker(self) -> None:
        logger.debug("UI Click: Browse for leaf image")
        self._acquisition.select_via_picker(ask_for_image_path(self))

    # ------------------------------------------------------------------------
    # RENDERING
    # ------------------------------------------------------------------------
    def _render_preview(self) -> None:
        if self._preview is None:
            return
        pixmap = QPixmap.fromImage(self._preview.image)
        if pixmap.isNull():
            self._image_label.setText(self._preview.file_name)
            return
        self._image_label.setPixmap(
            pixmap.scaled(
                self._image_label.size(),
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
        )

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self._render_preview()

    # ------------------------------------------------------------------------
    # MOUSE AND DRAG EVENTS
    # ------------------------------------------------------------------------
    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton and self._preview is None:
            self.open_picker()
            event.accept()
            return
        super().mousePressEvent(event)

    # Every drag is accepted so the matching leave or drop always arrives;
    # the drop path filters the payload.
    def dragEnterEvent(self, event: QDragEnterEvent) -> None:
        logger.debug("UI Event: Drag entered upload area")
        event.acceptProposedAction()
        self._acquisition.drag_entered()

    def dragMoveEvent(self, event: QDragMoveEvent) -> None:
        event.acceptProposedAction()
        self._acquisition.drag_moved()

    def dragLeaveEvent(self, event: QDragLeaveEvent) -> None:
        logger.debug("UI Event: Drag left upload area")
        self._acquisition.drag_left()
        event.accept()

    def dropEvent(self, event: QDropEvent) -> None:
        urls = event.mimeData().urls()
        paths = [url.toLocalFile() for url in urls if url.isLocalFile()]
        logger.debug("UI Event: Dropped %d local files", len(paths))
        event.acceptProposedAction()
        self._acquisition.select_via_drop(paths)

    @Slot(bool)
    def _on_drag_active_changed(self, active: bool) -> None:
        self.setProperty("dragActive", active)
        self.style().unpolish(self)
        self.style().polish(self)
