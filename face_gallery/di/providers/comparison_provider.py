from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...infrastructure.images import ImageLoader
from ...processing.descriptors import DescriptorExtractor
from ...processing.matching import MatchEvaluator, MatchPolicy, build_policy
from ...processing.models import FaceAnalysisProvider, ModelReadiness
from ...application.services.comparison_service import ComparisonService
from ...application.use_cases.comparison.run_comparison import RunComparisonUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ComparisonProvider:
    """Comparison provider - image loading, descriptor extraction, matching"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register comparison services (depends on ModelProvider).

        Raises:
            ValueError: If MATCH_POLICY names an unknown policy
        """
        settings = get_settings()

        image_loader = ImageLoader(
            image_root=settings.image_root,
            timeout=settings.image_fetch_timeout,
        )
        extractor = DescriptorExtractor(
            provider=container.get(FaceAnalysisProvider),
            readiness=container.get(ModelReadiness),
            image_loader=image_loader,
        )
        policy = build_policy(
            settings.match_policy,
            pairwise_threshold=settings.pairwise_threshold,
            matcher_threshold=settings.matcher_threshold,
        )
        evaluator = MatchEvaluator(policy)

        container.register_singleton(ImageLoader, image_loader)
        container.register_singleton(DescriptorExtractor, extractor)
        container.register_singleton(MatchPolicy, policy)
        container.register_singleton(MatchEvaluator, evaluator)
        container.register_singleton(
            ComparisonService,
            ComparisonService(
                readiness=container.get(ModelReadiness),
                extractor=extractor,
                evaluator=evaluator,
            ),
        )

        container.register_factory(
            RunComparisonUseCase,
            lambda: RunComparisonUseCase(
                comparison_service=container.get(ComparisonService)
            )
        )
