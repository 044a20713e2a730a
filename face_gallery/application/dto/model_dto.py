from typing import Dict, Optional
from pydantic import BaseModel


class ModelStatusResponse(BaseModel):
    """DTO for face model readiness"""
    state: str
    ready: bool
    error: Optional[str] = None
    capabilities: Dict[str, str]
    policy: str
    threshold: float
