"""
Unit tests for ComparisonService (readiness gate, anchor selection, concurrency join).
"""
import asyncio
from unittest.mock import AsyncMock, MagicMock

import numpy as np
import pytest

from face_gallery.application.services.comparison_service import ComparisonService
from face_gallery.domain.models import ComparisonStatus
from face_gallery.processing.matching import MatchEvaluator, PairwiseDistancePolicy
from face_gallery.processing.models import ModelReadiness


def _at(distance: float) -> np.ndarray:
    return np.array([distance, 0.0, 0.0, 0.0], dtype=np.float32)


def _ready() -> ModelReadiness:
    readiness = ModelReadiness()
    readiness.mark_ready()
    return readiness


def _service(readiness, faces_by_ref):
    extractor = MagicMock()
    extractor.describe = AsyncMock(side_effect=lambda ref: list(faces_by_ref.get(ref, [])))
    evaluator = MatchEvaluator(PairwiseDistancePolicy())
    return ComparisonService(readiness=readiness, extractor=extractor, evaluator=evaluator), extractor


class TestComparisonService:
    """Tests for ComparisonService.compare"""

    @pytest.mark.asyncio
    async def test_skips_when_models_not_ready(self):
        service, extractor = _service(ModelReadiness(), {"main": [_at(0)]})
        result = await service.compare("main", ["a"])
        assert result.status == ComparisonStatus.SKIPPED_NOT_READY
        assert result.matched == []
        extractor.describe.assert_not_called()

    @pytest.mark.asyncio
    async def test_skips_when_loading_failed(self):
        readiness = ModelReadiness()
        readiness.mark_failed("boom")
        service, extractor = _service(readiness, {})
        result = await service.compare("main", ["a"])
        assert result.status == ComparisonStatus.SKIPPED_NOT_READY
        extractor.describe.assert_not_called()

    @pytest.mark.asyncio
    async def test_no_face_in_main_gives_empty(self):
        service, extractor = _service(_ready(), {"main": [], "a": [_at(0.1)]})
        result = await service.compare("main", ["a"])
        assert result.status == ComparisonStatus.NO_FACE_IN_MAIN
        assert result.matched == []
        # Gallery is never touched without an anchor
        extractor.describe.assert_awaited_once_with("main")

    @pytest.mark.asyncio
    async def test_end_to_end_single_match(self):
        faces = {
            "main": [_at(0)],
            "A": [_at(0.30)],
            "B": [_at(0.60)],
            "C": [],
        }
        service, _ = _service(_ready(), faces)
        result = await service.compare("main", ["A", "B", "C"])
        assert result.status == ComparisonStatus.COMPLETED
        assert result.matched == ["A"]
        assert result.fallback_used is False
        assert [s.image_ref for s in result.scores] == ["A", "B"]

    @pytest.mark.asyncio
    async def test_end_to_end_fallback(self):
        faces = {
            "main": [_at(0)],
            "A": [_at(0.60)],
            "B": [_at(0.55)],
            "C": [],
        }
        service, _ = _service(_ready(), faces)
        result = await service.compare("main", ["A", "B", "C"])
        assert result.matched == ["B"]
        assert result.fallback_used is True

    @pytest.mark.asyncio
    async def test_first_main_face_is_anchor(self):
        # Second main face would match A; the first (far away) one is used
        faces = {
            "main": [_at(5.0), _at(0.0)],
            "A": [_at(0.1)],
        }
        service, _ = _service(_ready(), faces)
        result = await service.compare("main", ["A"])
        assert result.scores[0].distance == pytest.approx(4.9, rel=1e-5)
        assert result.scores[0].matched is False

    @pytest.mark.asyncio
    async def test_every_gallery_image_is_described(self):
        faces = {"main": [_at(0)], "A": [_at(0.2)], "B": [_at(0.3)]}
        service, extractor = _service(_ready(), faces)
        await service.compare("main", ["A", "B"])
        described = [call.args[0] for call in extractor.describe.await_args_list]
        assert sorted(described) == ["A", "B", "main"]

    @pytest.mark.asyncio
    async def test_descriptor_length_mismatch_skips_image(self):
        faces = {"main": [_at(0)], "A": [np.zeros(3, dtype=np.float32)], "B": [_at(0.2)]}
        service, _ = _service(_ready(), faces)
        result = await service.compare("main", ["A", "B"])
        assert result.matched == ["B"]

    @pytest.mark.asyncio
    async def test_unexpected_error_gives_failed(self):
        service, extractor = _service(_ready(), {})
        extractor.describe.side_effect = RuntimeError("backend exploded")
        result = await service.compare("main", ["A"])
        assert result.status == ComparisonStatus.FAILED
        assert result.matched == []
        assert result.policy == "pairwise"

    @pytest.mark.asyncio
    async def test_gallery_units_run_concurrently_then_evaluate(self):
        gallery = ["A", "B", "C"]
        distances = {"A": 0.60, "B": 0.30, "C": 0.55}
        events = []
        all_entered = asyncio.Event()

        async def describe(ref):
            if ref == "main":
                return [_at(0)]
            events.append(f"enter:{ref}")
            if sum(e.startswith("enter:") for e in events) == len(gallery):
                all_entered.set()
            # Blocks until every unit has started; units cannot run one after another
            await all_entered.wait()
            # Later gallery entries finish first
            await asyncio.sleep(0.01 * (len(gallery) - gallery.index(ref)))
            events.append(f"exit:{ref}")
            return [_at(distances[ref])]

        class RecordingEvaluator(MatchEvaluator):
            def evaluate(self, scores):
                events.append("evaluate")
                return super().evaluate(scores)

        extractor = MagicMock()
        extractor.describe = AsyncMock(side_effect=describe)
        service = ComparisonService(
            readiness=_ready(),
            extractor=extractor,
            evaluator=RecordingEvaluator(PairwiseDistancePolicy()),
        )

        result = await asyncio.wait_for(service.compare("main", gallery), timeout=2)

        assert events[:3] == ["enter:A", "enter:B", "enter:C"]
        assert events[3:6] == ["exit:C", "exit:B", "exit:A"]
        assert events[-1] == "evaluate"
        assert events.count("evaluate") == 1
        assert [s.image_ref for s in result.scores] == gallery
        assert result.matched == ["B"]
