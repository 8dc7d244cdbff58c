"""Shared fixtures: in-memory .lottie containers and sample documents."""

import io
import json
import zipfile

import cv2
import numpy as np
import pytest


def _build_lottie(entries, dirs=()):
    """Build a ZIP in memory. Dict/list values are serialized as JSON."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        for d in dirs:
            zf.writestr(zipfile.ZipInfo(d), b"")
        for path, value in entries.items():
            if isinstance(value, (dict, list)):
                value = json.dumps(value)
            zf.writestr(path, value)
    return buf.getvalue()


@pytest.fixture
def build_lottie():
    return _build_lottie


@pytest.fixture
def png_bytes():
    """A real 6x4 PNG."""
    ok, buf = cv2.imencode(".png", np.zeros((4, 6, 3), dtype=np.uint8))
    assert ok
    return buf.tobytes()


@pytest.fixture
def animation_doc():
    """Minimal animation referencing one external image."""
    return {
        "v": "5.7.4",
        "fr": 30,
        "w": 100,
        "h": 100,
        "assets": [
            {"id": "img_0", "w": 6, "h": 4, "u": "/images/", "p": "img_0.png", "e": 0},
        ],
        "layers": [],
    }
