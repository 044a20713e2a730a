from typing import List, Optional
from pydantic import BaseModel, Field


class ComparisonRequest(BaseModel):
    """DTO for a one-off comparison request"""
    main_image: str = Field(..., min_length=1)
    gallery: List[str] = Field(default_factory=list)


class ImageMatchResponse(BaseModel):
    """DTO for the score of one gallery image"""
    image_ref: str
    distance: float
    matched: bool
    label: Optional[str] = None


class ComparisonResponse(BaseModel):
    """DTO for comparison result"""
    status: str
    matched: List[str]
    scores: List[ImageMatchResponse] = Field(default_factory=list)
    best_image: Optional[str] = None
    best_distance: Optional[float] = None
    fallback_used: bool = False
    policy: Optional[str] = None
    threshold: Optional[float] = None
