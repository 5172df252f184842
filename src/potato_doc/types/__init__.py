"""Type definitions for potato-doc."""

from potato_doc.types.analysis import (
    CONFIDENCE,
    FAILURE_MESSAGE,
    AnalysisError,
    AnalysisMode,
    AnalysisResult,
    AnalysisView,
    InferenceResponse,
    PreviewHandle,
    SelectedFile,
)

__all__ = [
    "CONFIDENCE",
    "FAILURE_MESSAGE",
    "AnalysisError",
    "AnalysisMode",
    "AnalysisResult",
    "AnalysisView",
    "InferenceResponse",
    "PreviewHandle",
    "SelectedFile",
]
