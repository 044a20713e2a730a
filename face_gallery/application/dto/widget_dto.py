from typing import List, Optional
from pydantic import BaseModel, Field

from .comparison_dto import ComparisonResponse


class WidgetCreateRequest(BaseModel):
    """DTO for widget creation request"""
    id: Optional[str] = Field(default=None, min_length=1, max_length=80, pattern=r"^[A-Za-z0-9_-]+$")
    main_image: str = Field(..., min_length=1)
    gallery: List[str] = Field(default_factory=list)


class MainImageUpdateRequest(BaseModel):
    """DTO for replacing a widget's main image"""
    main_image: str = Field(..., min_length=1)


class GalleryUpdateRequest(BaseModel):
    """DTO for replacing a widget's gallery"""
    gallery: List[str]


class WidgetResponse(BaseModel):
    """DTO for widget response"""
    id: str
    main_image: str
    gallery: List[str]
    matched: List[str]
    generation: int
    last_result: Optional[ComparisonResponse] = None
