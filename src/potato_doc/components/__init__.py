"""Reusable widgets for the Potato Doc window."""

from potato_doc.components.result_panel import ResultPanel
from potato_doc.components.upload_area import UploadArea

__all__ = ["ResultPanel", "UploadArea"]
