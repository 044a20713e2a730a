from .model_controller import router as model_router
from .comparison_controller import router as comparison_router
from .widget_controller import router as widget_router
from .page_controller import router as page_router


__all__ = ["model_router", "comparison_router", "widget_router", "page_router"]
