"""Condition-specific copy for a finished analysis."""

from dataclasses import dataclass

from potato_doc.types import AnalysisResult

HEALTHY_CONDITION = "Healthy"

HEALTHY_TIPS = (
    "Monitor regularly for early signs of disease",
    "Maintain good watering practices",
    "Ensure plants receive appropriate nutrients",
    "Practice crop rotation in future plantings",
)

DISEASE_ACTIONS = (
    "Remove affected leaves to prevent spread",
    "Apply appropriate fungicide treatment",
    "Ensure proper air circulation between plants",
    "Avoid overhead watering to reduce moisture on leaves",
)


@dataclass(frozen=True)
class ResultPresentation:
    branch: str  # "healthy" or "disease"
    heading: str
    confidence_text: str
    summary: str
    recommendation_heading: str
    recommendations: tuple[str, ...]


def is_healthy(condition: str) -> bool:
    return condition == HEALTHY_CONDITION


def present_result(result: AnalysisResult) -> ResultPresentation:
    """Map a result onto the healthy or the generic disease copy.

    Any label other than ``"Healthy"`` gets the disease guidance, whatever
    the service returned.
    """
    confidence_text = f"{result.confidence}% confidence"
    if is_healthy(result.condition):
        return ResultPresentation(
            branch="healthy",
            heading=result.condition,
            confidence_text=confidence_text,
            summary=(
                "Good news! Your potato plant appears to be healthy. "
                "Continue with your current care routine."
            ),
            recommendation_heading="Maintenance Tips",
            recommendations=HEALTHY_TIPS,
        )
    return ResultPresentation(
        branch="disease",
        heading=result.condition,
        confidence_text=confidence_text,
        summary=(
            f"This leaf shows signs of {result.condition}. "
            "Early treatment is recommended."
        ),
        recommendation_heading="Recommended Action",
        recommendations=DISEASE_ACTIONS,
    )
