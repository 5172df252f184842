"""Upload and analysis view bound to the analysis controller."""

# =============================================================================
# IMPORTS
# =============================================================================

import logging

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import (
    QGroupBox,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from potato_doc.acquisition import FileAcquisition
from potato_doc.components import ResultPanel, UploadArea
from potato_doc.controller import AnalysisController
from potato_doc.presenter import present_result
from potato_doc.types import AnalysisMode, AnalysisResult, AnalysisView

logger = logging.getLogger(__name__)


# =============================================================================
# ANALYSIS PANEL
# =============================================================================


class AnalysisPanel(QWidget):
    """Hosts the upload area and the analyzing, error and result boxes.

    The panel holds no analysis state of its own; it renders each
    ``AnalysisView`` emitted by the controller and forwards user actions.
    """

    def __init__(
        self,
        controller: AnalysisController,
        acquisition: FileAcquisition | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._acquisition = acquisition or FileAcquisition(self)
        self._build_ui()
        self._connect_signals()
        self.render(controller.snapshot())

    # ------------------------------------------------------------------------
    # UI CONSTRUCTION
    # ------------------------------------------------------------------------
    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)

        title = QLabel("Potato Disease Detection")
        title.setObjectName("heroTitle")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        subtitle = QLabel(
            "Upload a photo of potato plant leaves for instant AI-powered "
            "disease detection"
        )
        subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        subtitle.setWordWrap(True)
        layout.addWidget(subtitle)

        self._upload_area = UploadArea(self._acquisition, self)
        layout.addWidget(self._upload_area, 1)

        layout.addWidget(self._build_analyzing_box())
        layout.addWidget(self._build_error_box())

        self._result_panel = ResultPanel(self)
        layout.addWidget(self._result_panel)

    def _build_analyzing_box(self) -> QWidget:
        self._analyzing_box = QWidget()
        box_layout = QVBoxLayout(self._analyzing_box)
        progress = QProgressBar()
        progress.setRange(0, 0)  # Indeterminate progress
        progress.setTextVisible(False)
        box_layout.addWidget(progress)
        box_layout.addWidget(QLabel("Analyzing your leaf image..."))
        return self._analyzing_box

    def _build_error_box(self) -> QGroupBox:
        self._error_box = QGroupBox()
        self._error_box.setObjectName("errorBox")
        box_layout = QVBoxLayout(self._error_box)
        self._error_label = QLabel()
        self._error_label.setWordWrap(True)
        box_layout.addWidget(self._error_label)
        self._try_again_button = QPushButton("Try Again")
        box_layout.addWidget(self._try_again_button)
        return self._error_box

    # ------------------------------------------------------------------------
    # SIGNAL CONNECTIONS
    # ------------------------------------------------------------------------
    def _connect_signals(self) -> None:
        self._acquisition.file_selected.connect(self._controller.select_file)
        self._controller.state_changed.connect(self.render)
        self._try_again_button.clicked.connect(self._on_reset_clicked)
        self._result_panel.analyze_another_requested.connect(self._on_reset_clicked)

    # ------------------------------------------------------------------------
    # RENDERING
    # ------------------------------------------------------------------------
    @Slot(object)
    def render(self, view: AnalysisView) -> None:
        logger.debug("Rendering view mode=%s", view.mode.value)
        self._upload_area.set_preview(view.preview)
        self._analyzing_box.setVisible(view.mode is AnalysisMode.ANALYZING)
        self._error_box.setVisible(view.mode is AnalysisMode.ERROR)
        self._result_panel.setVisible(view.mode is AnalysisMode.RESULT)

        if view.mode is AnalysisMode.ERROR:
            self._error_label.setText(view.message or "")
        elif view.mode is AnalysisMode.RESULT:
            result = AnalysisResult(
                condition=view.condition, confidence=view.confidence
            )
            self._result_panel.show_presentation(present_result(result))

    @property
    def upload_area(self) -> UploadArea:
        return self._upload_area

    @property
    def acquisition(self) -> FileAcquisition:
        return self._acquisition

    @property
    def analyzing_box(self) -> QWidget:
        return self._analyzing_box

    @property
    def error_box(self) -> QGroupBox:
        return self._error_box

    @property
    def error_label(self) -> QLabel:
        return self._error_label

    @property
    def try_again_button(self) -> QPushButton:
        return self._try_again_button

    @property
    def result_panel(self) -> ResultPanel:
        return self._result_panel

    # ------------------------------------------------------------------------
    # EVENT HANDLERS
    # ------------------------------------------------------------------------
    @Slot()
    def _on_reset_clicked(self) -> None:
        logger.debug("UI Click: Reset analysis")
        self._controller.reset()
