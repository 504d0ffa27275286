"""
Classification API routes
"""
from typing import List

from fastapi import APIRouter, Depends

from ticket_triage.classification.engine import ClassificationEngine, get_engine
from ticket_triage.models.schemas import BatchClassifyRequest, ClassificationResult, ClassifyRequest

router = APIRouter(prefix="/api/v1/classify", tags=["classify"])


@router.post("", response_model=ClassificationResult)
async def classify_text(
    request: ClassifyRequest,
    engine: ClassificationEngine = Depends(get_engine)
):
    """
    Classify free text without storing anything
    """
    return engine.classify(request)


@router.post("/batch", response_model=List[ClassificationResult])
async def classify_batch(
    request: BatchClassifyRequest,
    engine: ClassificationEngine = Depends(get_engine)
):
    """
    Classify many requests; results keep the input order
    """
    return await engine.classify_batch(request.items)
