"""Display of a finished analysis with its recommendations."""

# =============================================================================
# IMPORTS
# =============================================================================

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from potato_doc.presenter import ResultPresentation


class ResultPanel(QGroupBox):
    """Shows the condition, its confidence and the matching guidance."""

    analyze_another_requested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._build_ui()
        self._another_button.clicked.connect(self.analyze_another_requested)

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)

        header = QHBoxLayout()
        self._heading_label = QLabel()
        self._heading_label.setObjectName("resultHeading")
        self._confidence_label = QLabel()
        header.addWidget(self._heading_label)
        header.addStretch()
        header.addWidget(self._confidence_label)
        layout.addLayout(header)

        self._summary_label = QLabel()
        self._summary_label.setWordWrap(True)
        layout.addWidget(self._summary_label)

        self._recommendation_heading = QLabel()
        self._recommendation_heading.setObjectName("recommendationHeading")
        layout.addWidget(self._recommendation_heading)

        self._recommendations_label = QLabel()
        self._recommendations_label.setWordWrap(True)
        layout.addWidget(self._recommendations_label)

        self._another_button = QPushButton("Analyze Another Image")
        layout.addWidget(self._another_button)

    def show_presentation(self, presentation: ResultPresentation) -> None:
        self.setProperty("branch", presentation.branch)
        self.style().unpolish(self)
        self.style().polish(self)

        self._heading_label.setText(presentation.heading)
        self._confidence_label.setText(presentation.confidence_text)
        self._summary_label.setText(presentation.summary)
        self._recommendation_heading.setText(presentation.recommendation_heading)
        self._recommendations_label.setText(
            "\n".join(f"• {item}" for item in presentation.recommendations)
        )

    @property
    def branch(self) -> str | None:
        return self.property("branch")
