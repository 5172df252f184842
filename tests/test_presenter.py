import pytest

from potato_doc.presenter import DISEASE_ACTIONS, HEALTHY_TIPS, present_result
from potato_doc.types import AnalysisResult


def test_healthy_branch():
    presentation = present_result(AnalysisResult(condition="Healthy"))

    assert presentation.branch == "healthy"
    assert presentation.heading == "Healthy"
    assert presentation.confidence_text == "98% confidence"
    assert presentation.recommendation_heading == "Maintenance Tips"
    assert presentation.recommendations == HEALTHY_TIPS


def test_disease_branch_uses_generic_guidance():
    presentation = present_result(AnalysisResult(condition="Late Blight"))

    assert presentation.branch == "disease"
    assert "Late Blight" in presentation.summary
    assert presentation.recommendation_heading == "Recommended Action"
    assert presentation.recommendations == DISEASE_ACTIONS


@pytest.mark.parametrize("condition", ["healthy", "Healthy ", "Potato___healthy", ""])
def test_only_exact_healthy_label_is_healthy(condition):
    assert present_result(AnalysisResult(condition=condition)).branch == "disease"
