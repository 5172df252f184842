"""Primary application window hosting the analysis panel."""

# =============================================================================
# IMPORTS
# =============================================================================

import logging

from PySide6.QtCore import QObject, Signal, Slot
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QLabel, QMainWindow, QStatusBar, QVBoxLayout, QWidget

from potato_doc.analysis_panel import AnalysisPanel
from potato_doc.controller import AnalysisController
from potato_doc.types import AnalysisView

logger = logging.getLogger(__name__)

FOOTER_TEXT = "Potato Doc | AI-powered plant disease detection"

STYLE_SHEET = """
#uploadArea { border: 2px dashed #9e9e9e; border-radius: 8px; }
#uploadArea[dragActive="true"] { border-color: #2e7d32; background: #e8f5e9; }
#heroTitle, #resultHeading { font-size: 18px; font-weight: bold; }
#errorBox { color: #c62828; }
ResultPanel[branch="healthy"] #resultHeading { color: #2e7d32; }
ResultPanel[branch="disease"] #resultHeading { color: #c62828; }
"""


# =============================================================================
# STATUS MANAGER
# =============================================================================


class StatusManager(QObject):
    """Status manager for showing user-friendly messages."""

    status_message = Signal(str)
    status_cleared = Signal()

    def show_message(self, message: str) -> None:
        logger.debug("Status Bar: Showing message - %s", message)
        self.status_message.emit(message)

    def clear_status(self) -> None:
        logger.debug("Status Bar: Clearing status")
        self.status_cleared.emit()


# =============================================================================
# MAIN WINDOW CLASS
# =============================================================================


class MainWindow(QMainWindow):
    """Top-level window wiring the controller, the panel and the status bar."""

    def __init__(self, controller: AnalysisController) -> None:
        super().__init__()
        self._controller = controller
        self.status_manager = StatusManager(self)
        self._build_ui()
        self._connect_signals()

    # ------------------------------------------------------------------------
    # UI BUILDING
    # ------------------------------------------------------------------------
    def _build_ui(self) -> None:
        self.setWindowTitle("Potato Doc")
        self.resize(720, 900)
        self.setStyleSheet(STYLE_SHEET)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        self.analysis_panel = AnalysisPanel(self._controller, parent=central)
        layout.addWidget(self.analysis_panel, 1)

        footer = QLabel(FOOTER_TEXT)
        layout.addWidget(footer)
        self.setCentralWidget(central)

        self._status_label = QLabel("Ready")
        status_bar = QStatusBar(self)
        status_bar.addWidget(self._status_label)
        self.setStatusBar(status_bar)

    def _connect_signals(self) -> None:
        self.status_manager.status_message.connect(self._status_label.setText)
        self.status_manager.status_cleared.connect(self._on_status_cleared)

        self._controller.analysis_started.connect(self._on_analysis_started)
        self._controller.analysis_finished.connect(self._on_analysis_finished)
        self._controller.state_changed.connect(self._on_state_changed)

    # ------------------------------------------------------------------------
    # EVENT HANDLERS
    # ------------------------------------------------------------------------
    @Slot()
    def _on_analysis_started(self) -> None:
        self.status_manager.show_message("Analyzing image...")

    @Slot(bool, str)
    def _on_analysis_finished(self, success: bool, message: str) -> None:
        if success:
            self.status_manager.show_message(f"Analysis complete: {message}")
        else:
            self.status_manager.show_message("Analysis failed")

    @Slot(object)
    def _on_state_changed(self, view: AnalysisView) -> None:
        if view.preview is None:
            self.status_manager.clear_status()

    @Slot()
    def _on_status_cleared(self) -> None:
        self._status_label.setText("Ready")

    def closeEvent(self, event: QCloseEvent) -> None:
        logger.info("Main window closing; releasing analysis resources")
        self._controller.shutdown()
        super().closeEvent(event)
