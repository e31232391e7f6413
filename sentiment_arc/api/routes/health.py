"""
Health check endpoint.
"""

from fastapi import APIRouter, Depends

from sentiment_arc import __version__
from sentiment_arc.api.dependencies import get_lexicon
from sentiment_arc.api.models import HealthResponse
from sentiment_arc.lexicon.schemas import Lexicon

router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health(lexicon: Lexicon = Depends(get_lexicon)) -> HealthResponse:
    """
    Report service health.

    The service is degraded when the lexicon is empty (failed load): it still
    answers, but every analysis comes back neutral.
    """
    return HealthResponse(
        status="degraded" if lexicon.is_empty else "healthy",
        version=__version__,
        lexicon=lexicon.summary(),
    )
