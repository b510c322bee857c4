"""
Request and response models for the NFT Evaluator API.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from nft_evaluator import EvaluationResult, LocationType


class EvaluationRequest(BaseModel):
    """Request to evaluate a token URI."""
    token_uri: str = Field(min_length=1)


class EvaluationResponse(EvaluationResult):
    """Evaluation result plus where the image points, when metadata was parsed."""
    image_location: Optional[LocationType] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: datetime
    gateway: str
