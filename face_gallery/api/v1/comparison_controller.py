# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.comparison_dto import ComparisonRequest, ComparisonResponse
from ...application.use_cases.comparison import RunComparisonUseCase
from ...di.container import get_container


router = APIRouter(tags=["comparisons"])


@router.post("", response_model=ComparisonResponse)
async def run_comparison(request: ComparisonRequest) -> ComparisonResponse:
    """
    Compare a main image against a gallery without creating a widget

    Args:
        request: Main image and gallery references

    Returns:
        ComparisonResponse (status "skipped_not_ready" while models are loading)
    """
    container = get_container()
    run_comparison_use_case = container.get(RunComparisonUseCase)
    return await run_comparison_use_case.execute(request)
