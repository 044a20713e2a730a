# Standard library imports
import asyncio
import logging
import secrets
from typing import Dict, List, Optional, Sequence

# Local application imports
from ...domain.models import ComparisonResult, ComparisonStatus, ComparisonWidget
from .comparison_service import ComparisonService

logger = logging.getLogger(__name__)

DEFAULT_WIDGET_ID = "default"


class WidgetRegistry:
    """
    In-memory store of comparison widgets.

    Each widget is independent: its own inputs, matched set and generation
    counter. Nothing is persisted.
    """

    def __init__(self) -> None:
        self._widgets: Dict[str, ComparisonWidget] = {}

    def _generate_widget_id(self) -> str:
        """
        Generate a unique widget ID

        Returns:
            Unique widget ID string in format WGT-XXXXXXXXXXXX
        """
        return f"WGT-{secrets.token_hex(6).upper()}"

    def create(
        self,
        main_image: str,
        gallery: Sequence[str],
        widget_id: Optional[str] = None,
    ) -> ComparisonWidget:
        """
        Register a new widget.

        Raises:
            ValueError: If the ID is taken or the inputs are invalid
        """
        widget_id = widget_id or self._generate_widget_id()
        if widget_id in self._widgets:
            raise ValueError(f"Widget already exists: {widget_id}")
        widget = ComparisonWidget(id=widget_id, main_image=main_image, gallery=list(gallery))
        self._widgets[widget_id] = widget
        return widget

    def get(self, widget_id: str) -> Optional[ComparisonWidget]:
        return self._widgets.get(widget_id)

    def list(self) -> List[ComparisonWidget]:
        return list(self._widgets.values())

    def remove(self, widget_id: str) -> bool:
        return self._widgets.pop(widget_id, None) is not None


class WidgetService:
    """
    Runs comparisons on behalf of widgets.

    A run started for an older generation never overwrites the matched set of
    a newer one; it comes back with status SUPERSEDED instead. In-flight runs
    are not cancelled.
    """

    def __init__(self, registry: WidgetRegistry, comparison_service: ComparisonService) -> None:
        self.registry = registry
        self.comparison_service = comparison_service

    def ensure_default_widget(self, main_image: str, gallery: Sequence[str]) -> Optional[ComparisonWidget]:
        """Create the configured default widget unless it already exists."""
        existing = self.registry.get(DEFAULT_WIDGET_ID)
        if existing is not None:
            return existing
        try:
            return self.registry.create(main_image, gallery, widget_id=DEFAULT_WIDGET_ID)
        except ValueError as e:
            logger.warning(f"Default widget not created: {e}")
            return None

    async def refresh(self, widget_id: str) -> ComparisonResult:
        """
        Re-run the comparison for a widget and commit it if still current.

        Raises:
            ValueError: If the widget does not exist
        """
        widget = self.registry.get(widget_id)
        if widget is None:
            raise ValueError("Widget not found")

        generation = widget.next_generation()
        main_image = widget.main_image
        gallery = list(widget.gallery)

        if not gallery:
            result = ComparisonResult.empty(ComparisonStatus.COMPLETED)
        else:
            result = await self.comparison_service.compare(main_image, gallery)

        if result.status == ComparisonStatus.SKIPPED_NOT_READY:
            # Nothing ran; keep whatever the widget showed before
            return result

        if not widget.commit(generation, result):
            logger.info(f"Discarding superseded run {generation} of widget {widget_id} (current {widget.generation})")
            return result.with_status(ComparisonStatus.SUPERSEDED)
        return result

    async def refresh_all(self) -> None:
        """Refresh every widget that has both a main image and a gallery."""
        widgets = [w for w in self.registry.list() if w.can_compare]
        if not widgets:
            return
        await asyncio.gather(*(self.refresh(w.id) for w in widgets))

    async def update_inputs(
        self,
        widget_id: str,
        main_image: Optional[str] = None,
        gallery: Optional[Sequence[str]] = None,
    ) -> Optional[ComparisonResult]:
        """
        Replace a widget's main image and/or gallery, then refresh it.

        The refresh only happens when the widget can compare (main image set,
        gallery non-empty); otherwise the matched set is cleared.

        Raises:
            ValueError: If the widget does not exist or the main image is empty
        """
        widget = self.registry.get(widget_id)
        if widget is None:
            raise ValueError("Widget not found")
        if main_image is not None:
            if not main_image.strip():
                raise ValueError("Main image is required")
            widget.main_image = main_image
        if gallery is not None:
            widget.gallery = [ref for ref in gallery if ref and ref.strip()]

        if not widget.can_compare:
            widget.commit(widget.next_generation(), ComparisonResult.empty(ComparisonStatus.COMPLETED))
            return None
        return await self.refresh(widget_id)
