# External package imports
from fastapi import APIRouter, HTTPException, status
from fastapi.responses import HTMLResponse

# Local application imports
from ...application.services.widget_service import DEFAULT_WIDGET_ID, WidgetRegistry
from ...di.container import get_container
from ...presentation import render_widget_page


router = APIRouter(tags=["pages"])


def _render(widget_id: str) -> HTMLResponse:
    widget = get_container().get(WidgetRegistry).get(widget_id)
    if widget is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Widget not found"
        )
    return HTMLResponse(
        render_widget_page(widget.main_image, widget.gallery, widget.matched)
    )


@router.get("/", response_class=HTMLResponse)
async def default_widget_page() -> HTMLResponse:
    return _render(DEFAULT_WIDGET_ID)


@router.get("/widgets/{widget_id}", response_class=HTMLResponse)
async def widget_page(widget_id: str) -> HTMLResponse:
    """Render a widget's main image, gallery and matched subset"""
    return _render(widget_id)
