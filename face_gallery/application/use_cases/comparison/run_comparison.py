# Local application imports
from ...dto.comparison_dto import ComparisonRequest, ComparisonResponse
from ...dto.mappers import to_comparison_response
from ...services.comparison_service import ComparisonService


class RunComparisonUseCase:
    """Use case for a one-off comparison that is not tied to a widget"""

    def __init__(self, comparison_service: ComparisonService) -> None:
        self.comparison_service = comparison_service

    async def execute(self, request: ComparisonRequest) -> ComparisonResponse:
        """
        Compare the main image against the gallery

        Args:
            request: Main image and gallery references

        Returns:
            ComparisonResponse with the matched set and per-image scores
        """
        result = await self.comparison_service.compare(request.main_image, request.gallery)
        return to_comparison_response(result)
