from unittest.mock import Mock

import pytest
from PySide6.QtCore import QMimeData, QPoint, QPointF, Qt, QUrl
from PySide6.QtGui import QDragEnterEvent, QDragLeaveEvent, QDropEvent
from PySide6.QtTest import QTest

from potato_doc.analysis_panel import AnalysisPanel
from potato_doc.components import upload_area as upload_area_module
from potato_doc.controller import AnalysisController
from potato_doc.inference import InferenceClient, InferenceError
from potato_doc.main_window import MainWindow
from potato_doc.types import FAILURE_MESSAGE, AnalysisMode, InferenceResponse


class ManualDispatcher:
    def __init__(self):
        self.workers = []

    def __call__(self, worker, on_thread_finished):
        self.workers.append(worker)
        return None


@pytest.fixture
def setup():
    client = Mock(spec=InferenceClient)
    dispatcher = ManualDispatcher()
    controller = AnalysisController(client, dispatch=dispatcher)
    panel = AnalysisPanel(controller)
    return client, dispatcher, controller, panel


def test_idle_panel_shows_only_upload_area(setup):
    _, _, _, panel = setup

    assert panel.analyzing_box.isHidden()
    assert panel.error_box.isHidden()
    assert panel.result_panel.isHidden()


def test_panel_follows_analysis_to_result(setup, make_leaf):
    client, dispatcher, _, panel = setup
    client.classify.return_value = InferenceResponse(prediction="Late Blight")

    panel.acquisition.file_selected.emit(make_leaf())
    assert not panel.analyzing_box.isHidden()

    dispatcher.workers[0].run()
    assert panel.analyzing_box.isHidden()
    assert not panel.result_panel.isHidden()
    assert panel.result_panel.branch == "disease"


def test_try_again_returns_to_idle(setup, make_leaf):
    client, dispatcher, controller, panel = setup
    client.classify.side_effect = InferenceError("HTTP 500")

    panel.acquisition.file_selected.emit(make_leaf())
    dispatcher.workers[0].run()
    assert panel.error_label.text() == FAILURE_MESSAGE

    panel.try_again_button.click()

    assert panel.error_box.isHidden()
    assert controller.snapshot().preview is None
    assert controller.previews.live_count == 0


def test_upload_area_mirrors_drag_state(setup):
    _, _, _, panel = setup

    panel.acquisition.drag_entered()
    assert panel.upload_area.property("dragActive") is True

    panel.acquisition.drag_left()
    assert panel.upload_area.property("dragActive") is False


def _drag_enter(mime_data):
    return QDragEnterEvent(
        QPoint(10, 10),
        Qt.DropAction.CopyAction,
        mime_data,
        Qt.MouseButton.LeftButton,
        Qt.KeyboardModifier.NoModifier,
    )


def _drop(mime_data):
    return QDropEvent(
        QPointF(10, 10),
        Qt.DropAction.CopyAction,
        mime_data,
        Qt.MouseButton.LeftButton,
        Qt.KeyboardModifier.NoModifier,
    )


def test_text_drag_is_accepted_so_leave_clears_highlight(setup):
    _, _, _, panel = setup
    mime_data = QMimeData()
    mime_data.setText("not a file")

    enter = _drag_enter(mime_data)
    panel.upload_area.dragEnterEvent(enter)

    assert enter.isAccepted()
    assert panel.upload_area.property("dragActive") is True

    panel.upload_area.dragLeaveEvent(QDragLeaveEvent())
    assert panel.upload_area.property("dragActive") is False


def test_drop_of_remote_url_selects_nothing(setup):
    client, dispatcher, controller, panel = setup
    mime_data = QMimeData()
    mime_data.setUrls([QUrl("https://example.com/leaf.png")])

    panel.upload_area.dragEnterEvent(_drag_enter(mime_data))
    panel.upload_area.dropEvent(_drop(mime_data))

    assert panel.upload_area.property("dragActive") is False
    assert controller.snapshot().mode is AnalysisMode.IDLE
    assert dispatcher.workers == []
    client.classify.assert_not_called()


def test_drop_of_local_png_starts_analysis(setup, png_bytes, tmp_path):
    _, dispatcher, controller, panel = setup
    leaf_path = tmp_path / "leaf.png"
    leaf_path.write_bytes(png_bytes)
    mime_data = QMimeData()
    mime_data.setUrls([QUrl.fromLocalFile(str(leaf_path))])

    panel.upload_area.dragEnterEvent(_drag_enter(mime_data))
    panel.upload_area.dropEvent(_drop(mime_data))

    assert panel.upload_area.property("dragActive") is False
    assert controller.snapshot().mode is AnalysisMode.ANALYZING
    assert len(dispatcher.workers) == 1
    assert not panel.analyzing_box.isHidden()


def test_click_opens_picker_only_without_preview(setup, make_leaf, monkeypatch):
    _, _, controller, panel = setup
    picker = Mock(return_value="")
    monkeypatch.setattr(upload_area_module, "ask_for_image_path", picker)
    panel.show()

    QTest.mouseClick(panel.upload_area, Qt.MouseButton.LeftButton)
    assert picker.call_count == 1
    assert controller.snapshot().mode is AnalysisMode.IDLE

    panel.acquisition.file_selected.emit(make_leaf())
    QTest.mouseClick(panel.upload_area, Qt.MouseButton.LeftButton)
    assert picker.call_count == 1

    panel.close()


def test_status_bar_follows_analysis_and_reset(setup, make_leaf):
    client, dispatcher, controller, _ = setup
    client.classify.return_value = InferenceResponse(prediction="Healthy")
    window = MainWindow(controller)
    messages = []
    cleared = []
    window.status_manager.status_message.connect(messages.append)
    window.status_manager.status_cleared.connect(lambda: cleared.append(True))

    window.analysis_panel.acquisition.file_selected.emit(make_leaf())
    dispatcher.workers[-1].run()
    assert messages == ["Analyzing image...", "Analysis complete: Healthy"]
    assert cleared == []

    controller.reset()
    assert cleared == [True]

    window.close()
