"""Analysis-related data structures."""

# =============================================================================
# IMPORTS
# =============================================================================

from dataclasses import dataclass
from enum import Enum

from PySide6.QtGui import QImage


# =============================================================================
# CONSTANTS
# =============================================================================

# The classification service does not report a score
CONFIDENCE = 98

FAILURE_MESSAGE = (
    "We couldn't analyze this image. Please try with another photo of a potato leaf."
)


# =============================================================================
# DATA STRUCTURES
# =============================================================================


@dataclass(frozen=True)
class SelectedFile:
    """Image file chosen by the user via the picker or a drop."""

    name: str
    data: bytes
    mime_type: str

    @property
    def is_image(self) -> bool:
        return self.mime_type.startswith("image/")

    def __repr__(self) -> str:
        return (
            f"SelectedFile(name={self.name!r}, mime_type={self.mime_type!r}, "
            f"size={len(self.data)})"
        )


@dataclass(frozen=True, eq=False)
class PreviewHandle:
    """Renderable representation of the currently selected file."""

    handle_id: int
    file_name: str
    image: QImage


@dataclass(frozen=True)
class AnalysisResult:
    condition: str
    confidence: int = CONFIDENCE


@dataclass(frozen=True)
class AnalysisError:
    message: str = FAILURE_MESSAGE


@dataclass(frozen=True)
class InferenceResponse:
    """Normalized success payload of the classification endpoint."""

    prediction: str


class AnalysisMode(str, Enum):
    IDLE = "idle"
    ANALYZING = "analyzing"
    RESULT = "result"
    ERROR = "error"


@dataclass(frozen=True)
class AnalysisView:
    """Read-only snapshot of the analysis state handed to the UI.

    Only the fields relevant to ``mode`` are populated:

    - ``idle``: nothing
    - ``analyzing``: ``preview``
    - ``result``: ``preview``, ``condition`` and ``confidence``
    - ``error``: ``preview`` and ``message``
    """

    mode: AnalysisMode
    preview: PreviewHandle | None = None
    condition: str | None = None
    confidence: int | None = None
    message: str | None = None

    @classmethod
    def idle(cls) -> "AnalysisView":
        return cls(mode=AnalysisMode.IDLE)

    @classmethod
    def analyzing(cls, preview: PreviewHandle | None) -> "AnalysisView":
        return cls(mode=AnalysisMode.ANALYZING, preview=preview)

    @classmethod
    def from_result(
        cls, result: AnalysisResult, preview: PreviewHandle | None
    ) -> "AnalysisView":
        return cls(
            mode=AnalysisMode.RESULT,
            preview=preview,
            condition=result.condition,
            confidence=result.confidence,
        )

    @classmethod
    def from_error(
        cls, error: AnalysisError, preview: PreviewHandle | None
    ) -> "AnalysisView":
        return cls(mode=AnalysisMode.ERROR, preview=preview, message=error.message)


__all__ = [
    "CONFIDENCE",
    "FAILURE_MESSAGE",
    "SelectedFile",
    "PreviewHandle",
    "AnalysisResult",
    "AnalysisError",
    "InferenceResponse",
    "AnalysisMode",
    "AnalysisView",
]
