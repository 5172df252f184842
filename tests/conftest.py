import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QBuffer, QByteArray, QIODevice
from PySide6.QtGui import QColor, QImage
from PySide6.QtWidgets import QApplication

from potato_doc.types import SelectedFile


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


def _encode_png(color: str = "green") -> bytes:
    image = QImage(8, 8, QImage.Format.Format_RGB32)
    image.fill(QColor(color))
    data = QByteArray()
    buffer = QBuffer(data)
    buffer.open(QIODevice.OpenModeFlag.WriteOnly)
    image.save(buffer, "PNG")
    buffer.close()
    return bytes(data)


@pytest.fixture
def png_bytes() -> bytes:
    return _encode_png()


@pytest.fixture
def make_leaf(png_bytes):
    def _make(name: str = "leaf.png") -> SelectedFile:
        return SelectedFile(name=name, data=png_bytes, mime_type="image/png")

    return _make
