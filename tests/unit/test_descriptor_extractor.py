"""
Unit tests for DescriptorExtractor.
"""
import asyncio
import threading
import time
from unittest.mock import AsyncMock, MagicMock

import numpy as np
import pytest

from face_gallery.infrastructure.images import ImageLoadError
from face_gallery.processing.descriptors import DescriptorExtractor
from face_gallery.processing.models import ModelReadiness


def _ready() -> ModelReadiness:
    readiness = ModelReadiness()
    readiness.mark_ready()
    return readiness


def _image() -> np.ndarray:
    return np.zeros((8, 8, 3), dtype=np.uint8)


class TestDescriptorExtractor:
    """Tests for DescriptorExtractor"""

    @pytest.mark.asyncio
    async def test_extract_returns_descriptors_in_order(self):
        provider = MagicMock()
        provider.describe_faces.return_value = [np.ones(4), np.zeros(4)]
        extractor = DescriptorExtractor(provider, _ready(), MagicMock())
        descriptors = await extractor.extract(_image(), label="x.jpg")
        assert len(descriptors) == 2
        assert descriptors[0][0] == 1.0

    @pytest.mark.asyncio
    async def test_extract_not_ready_skips_backend(self):
        provider = MagicMock()
        extractor = DescriptorExtractor(provider, ModelReadiness(), MagicMock())
        assert await extractor.extract(_image()) == []
        provider.describe_faces.assert_not_called()

    @pytest.mark.asyncio
    async def test_extract_backend_error_gives_empty(self):
        provider = MagicMock()
        provider.describe_faces.side_effect = RuntimeError("bad tensor")
        extractor = DescriptorExtractor(provider, _ready(), MagicMock())
        assert await extractor.extract(_image()) == []

    @pytest.mark.asyncio
    async def test_describe_loads_then_extracts(self):
        provider = MagicMock()
        provider.describe_faces.return_value = [np.ones(4)]
        loader = MagicMock()
        loader.load = AsyncMock(return_value=_image())
        extractor = DescriptorExtractor(provider, _ready(), loader)
        descriptors = await extractor.describe("/imgs/a.jpg")
        loader.load.assert_awaited_once_with("/imgs/a.jpg")
        assert len(descriptors) == 1

    @pytest.mark.asyncio
    async def test_describe_load_error_gives_empty(self):
        provider = MagicMock()
        loader = MagicMock()
        loader.load = AsyncMock(side_effect=ImageLoadError("404"))
        extractor = DescriptorExtractor(provider, _ready(), loader)
        assert await extractor.describe("http://example.com/missing.jpg") == []
        provider.describe_faces.assert_not_called()

    @pytest.mark.asyncio
    async def test_describe_not_ready_does_not_load(self):
        loader = MagicMock()
        loader.load = AsyncMock()
        extractor = DescriptorExtractor(MagicMock(), ModelReadiness(), loader)
        assert await extractor.describe("a.jpg") == []
        loader.load.assert_not_called()


class SlowSharedModelProvider:
    """Provider that holds a shared model across a GIL-releasing gap, like OpenCV's setInput/forward."""

    def __init__(self):
        self._guard = threading.Lock()
        self._current = None
        self.in_flight = 0
        self.max_in_flight = 0

    def describe_faces(self, image):
        with self._guard:
            self.in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            self._current = int(image[0, 0, 0])
            time.sleep(0.02)
            return [np.full(4, self._current, dtype=np.float32)]
        finally:
            with self._guard:
                self.in_flight -= 1


class TestInferenceSerialization:
    """describe_faces never runs concurrently, even when extractions are gathered"""

    @pytest.mark.asyncio
    async def test_one_inference_in_flight(self):
        provider = SlowSharedModelProvider()
        extractor = DescriptorExtractor(provider, _ready(), MagicMock())
        images = [np.full((8, 8, 3), value, dtype=np.uint8) for value in (1, 2, 3, 4, 5)]

        results = await asyncio.gather(*(extractor.extract(image) for image in images))

        assert provider.max_in_flight == 1
        # Each image gets the descriptor computed from its own pixels
        assert [int(r[0][0]) for r in results] == [1, 2, 3, 4, 5]

    @pytest.mark.asyncio
    async def test_image_loading_stays_concurrent(self):
        entered = []
        all_entered = asyncio.Event()

        async def load(reference):
            entered.append(reference)
            if len(entered) == 3:
                all_entered.set()
            await all_entered.wait()
            return _image()

        loader = MagicMock()
        loader.load = AsyncMock(side_effect=load)
        provider = MagicMock()
        provider.describe_faces.return_value = []
        extractor = DescriptorExtractor(provider, _ready(), loader)

        await asyncio.wait_for(
            asyncio.gather(*(extractor.describe(ref) for ref in ("a", "b", "c"))),
            timeout=2,
        )
        assert sorted(entered) == ["a", "b", "c"]
