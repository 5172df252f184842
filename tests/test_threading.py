import threading
import time
from unittest.mock import Mock

import pytest
from PySide6.QtCore import QObject

from potato_doc.controller import AnalysisController
from potato_doc.inference import InferenceClient
from potato_doc.types import AnalysisMode, InferenceResponse
from potato_doc.utils import start_worker


def _wait_for(app, condition, timeout=5.0):
    deadline = time.monotonic() + timeout
    while not condition() and time.monotonic() < deadline:
        app.processEvents()
        time.sleep(0.01)
    return condition()


def test_classification_runs_in_background_thread(qapp, make_leaf):
    client = Mock(spec=InferenceClient)
    client.classify.return_value = InferenceResponse(prediction="Healthy")
    controller = AnalysisController(client)

    controller.select_file(make_leaf())

    assert _wait_for(qapp, lambda: not controller.is_analyzing)
    assert controller.snapshot().mode is AnalysisMode.RESULT
    assert controller.snapshot().condition == "Healthy"
    client.classify.assert_called_once()

    controller.shutdown()


def test_start_worker_requires_start_method():
    with pytest.raises(AttributeError):
        start_worker(QObject(), start_method="missing")


def test_shutdown_does_not_wait_for_a_blocked_request(qapp, make_leaf):
    release = threading.Event()

    def blocked_classify(file):
        release.wait(10)
        return InferenceResponse(prediction="Late Blight")

    client = Mock(spec=InferenceClient)
    client.classify.side_effect = blocked_classify
    controller = AnalysisController(client)
    controller.select_file(make_leaf())
    assert _wait_for(qapp, lambda: client.classify.call_count == 1)

    states = []
    controller.state_changed.connect(states.append)
    try:
        started = time.monotonic()
        controller.shutdown()
        assert time.monotonic() - started < 1.0
        assert controller.wait_for_workers(50) is False
    finally:
        release.set()

    assert controller.wait_for_workers(5000) is True
    _wait_for(qapp, lambda: False, timeout=0.1)
    assert controller.snapshot().mode is AnalysisMode.IDLE
    assert states == []


def test_wait_for_workers_without_workers_returns_immediately():
    controller = AnalysisController(Mock(spec=InferenceClient))

    assert controller.wait_for_workers(0) is True
