# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, HTTPException, Response, status

# Local application imports
from ...application.dto.comparison_dto import ComparisonResponse
from ...application.dto.widget_dto import (
    GalleryUpdateRequest,
    MainImageUpdateRequest,
    WidgetCreateRequest,
    WidgetResponse,
)
from ...application.use_cases.widget import (
    CreateWidgetUseCase,
    DeleteWidgetUseCase,
    GetWidgetUseCase,
    ListWidgetsUseCase,
    RefreshWidgetUseCase,
    UpdateWidgetInputsUseCase,
)
from ...di.container import get_container


router = APIRouter(tags=["widgets"])


def _not_found_or_bad_request(exception: ValueError) -> HTTPException:
    if "not found" in str(exception).lower():
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=str(exception)
    )


@router.post("", response_model=WidgetResponse, status_code=status.HTTP_201_CREATED)
async def create_widget(request: WidgetCreateRequest) -> WidgetResponse:
    """
    Create a widget and run its first comparison

    Args:
        request: Widget creation request

    Returns:
        WidgetResponse with created widget state
    """
    container = get_container()
    create_widget_use_case = container.get(CreateWidgetUseCase)

    try:
        return await create_widget_use_case.execute(request)
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exception)
        )


@router.get("", response_model=List[WidgetResponse])
async def list_widgets() -> List[WidgetResponse]:
    container = get_container()
    list_widgets_use_case = container.get(ListWidgetsUseCase)
    return await list_widgets_use_case.execute()


@router.get("/{widget_id}", response_model=WidgetResponse)
async def get_widget(widget_id: str) -> WidgetResponse:
    """
    Get a widget by ID

    Raises:
        HTTPException: If widget not found (404)
    """
    container = get_container()
    get_widget_use_case = container.get(GetWidgetUseCase)

    try:
        return await get_widget_use_case.execute(widget_id)
    except ValueError as exception:
        raise _not_found_or_bad_request(exception)


@router.put("/{widget_id}/main-image", response_model=WidgetResponse)
async def update_main_image(widget_id: str, request: MainImageUpdateRequest) -> WidgetResponse:
    """
    Replace the main image and re-run the comparison

    Raises:
        HTTPException: If widget not found (404) or main image invalid (400)
    """
    container = get_container()
    update_widget_use_case = container.get(UpdateWidgetInputsUseCase)

    try:
        return await update_widget_use_case.execute(widget_id, main_image=request.main_image)
    except ValueError as exception:
        raise _not_found_or_bad_request(exception)


@router.put("/{widget_id}/gallery", response_model=WidgetResponse)
async def update_gallery(widget_id: str, request: GalleryUpdateRequest) -> WidgetResponse:
    """
    Replace the gallery and re-run the comparison.
    An empty gallery clears the matched set without running.
    """
    container = get_container()
    update_widget_use_case = container.get(UpdateWidgetInputsUseCase)

    try:
        return await update_widget_use_case.execute(widget_id, gallery=request.gallery)
    except ValueError as exception:
        raise _not_found_or_bad_request(exception)


@router.post("/{widget_id}/refresh", response_model=ComparisonResponse)
async def refresh_widget(widget_id: str) -> ComparisonResponse:
    """
    Re-run the comparison of a widget

    Returns:
        ComparisonResponse of this run
    """
    container = get_container()
    refresh_widget_use_case = container.get(RefreshWidgetUseCase)

    try:
        return await refresh_widget_use_case.execute(widget_id)
    except ValueError as exception:
        raise _not_found_or_bad_request(exception)


@router.delete("/{widget_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_widget(widget_id: str) -> Response:
    container = get_container()
    delete_widget_use_case = container.get(DeleteWidgetUseCase)

    try:
        await delete_widget_use_case.execute(widget_id)
    except ValueError as exception:
        raise _not_found_or_bad_request(exception)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
