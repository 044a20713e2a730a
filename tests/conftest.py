"""
Shared pytest fixtures for face gallery tests.

FakeFaceProvider stands in for DeepFace: it "detects" faces by looking up the
value of an image's top-left pixel, so tests can write tiny solid-colour PNGs
and decide exactly which descriptors each one yields.
"""
import os
from pathlib import Path
from typing import Dict, List, Sequence
from unittest.mock import patch

import cv2
import numpy as np
import pytest

from face_gallery.domain.constants import (
    CAPABILITY_DESCRIPTOR_EXTRACTOR,
    CAPABILITY_FACE_DETECTOR,
    CAPABILITY_LANDMARK_PREDICTOR,
)


def descriptor(*values: float) -> np.ndarray:
    """Build a small float32 descriptor; distances to the zero anchor are easy to read."""
    return np.asarray(values, dtype=np.float32)


ANCHOR = descriptor(0.0, 0.0, 0.0, 0.0)


class FakeFaceProvider:
    """Face-analysis provider whose faces are keyed on the image's first pixel value."""

    def __init__(self, faces: Dict[int, Sequence[np.ndarray]] = None, fail_on: str = None):
        self.faces = dict(faces or {})
        self.fail_on = fail_on
        self.loaded: List[tuple] = []
        self.describe_calls = 0

    def model_ids(self) -> Dict[str, str]:
        return {
            CAPABILITY_FACE_DETECTOR: "fake-detector",
            CAPABILITY_LANDMARK_PREDICTOR: "fake-detector",
            CAPABILITY_DESCRIPTOR_EXTRACTOR: "fake-recognizer",
        }

    def load(self, capability: str, model_id: str):
        if capability == self.fail_on:
            raise RuntimeError(f"cannot load {model_id}")
        self.loaded.append((capability, model_id))
        return object()

    def describe_faces(self, image: np.ndarray) -> List[np.ndarray]:
        self.describe_calls += 1
        return list(self.faces.get(int(image[0, 0, 0]), []))


def write_image(path: Path, value: int) -> str:
    """Write an 8x8 solid PNG whose pixels all equal `value`; returns the path as a string."""
    image = np.full((8, 8, 3), value, dtype=np.uint8)
    assert cv2.imwrite(str(path), image)
    return str(path)


@pytest.fixture
def fake_provider():
    return FakeFaceProvider()


@pytest.fixture
def gallery_images(tmp_path):
    """
    Main image with one face (the zero anchor) and three gallery images:
    A at distance 0.30, B at 0.60, C with no face.
    """
    faces = {
        10: [ANCHOR],
        20: [descriptor(0.30, 0.0, 0.0, 0.0)],
        30: [descriptor(0.60, 0.0, 0.0, 0.0)],
        40: [],
        50: [descriptor(0.55, 0.0, 0.0, 0.0)],
    }
    paths = {
        "main": write_image(tmp_path / "main.png", 10),
        "a": write_image(tmp_path / "a.png", 20),
        "b": write_image(tmp_path / "b.png", 30),
        "c": write_image(tmp_path / "c.png", 40),
        "b_close": write_image(tmp_path / "b_close.png", 50),
    }
    return paths, faces


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "LOG_LEVEL": "WARNING",
        "MATCH_POLICY": "pairwise",
        "IMAGE_FETCH_TIMEOUT": "5",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars
