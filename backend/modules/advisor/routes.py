"""
Pole advisor endpoint.
"""

from fastapi import APIRouter

from modules.poles.models import SearchFilters

from .heuristic import recommend
from .models import AdvisorInput, Recommendation

router = APIRouter()


class RecommendationResponse(Recommendation):
    """Recommendation plus the listing filter that applies it."""

    filters: SearchFilters


@router.post("/recommendations", response_model=RecommendationResponse)
async def get_recommendations(data: AdvisorInput) -> RecommendationResponse:
    """Suggest pole ranges. No auth, nothing is stored."""
    result = recommend(data)
    return RecommendationResponse(
        **result.model_dump(),
        filters=result.to_search_filters(),
    )
