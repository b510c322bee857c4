"""
NFT evaluation endpoints.
"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
import logging

from nft_evaluator import NFTEvaluator, FetchFailure
from nft_evaluator.evaluator import get_image
from ..auth import require_api_key
from ..dependencies import get_evaluator
from ..models import EvaluationRequest, EvaluationResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/evaluate", response_model=EvaluationResponse)
async def evaluate_nft(
    request: EvaluationRequest,
    evaluator: NFTEvaluator = Depends(get_evaluator),
    api_key: Optional[str] = Depends(require_api_key)
):
    """Rate the metadata and image storage of a token URI."""
    try:
        result = await evaluator.evaluate_nft(request.token_uri)
    except FetchFailure as e:
        logger.warning(f"Evaluation failed: {e}")
        raise HTTPException(status_code=502, detail=str(e))

    image_location = None
    if result.metadata is not None:
        image_location = evaluator.classify_image_location(get_image(result.metadata))

    return EvaluationResponse(**result.model_dump(), image_location=image_location)
