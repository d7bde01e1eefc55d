"""
Pole advisor module.

Public API:
- recommend: fixed heuristic mapping the current pole and its feel to ranges
- AdvisorInput, Recommendation, Feel: advisor models
"""

from .heuristic import recommend
from .models import AdvisorInput, Feel, Range, Recommendation

__all__ = ["recommend", "AdvisorInput", "Feel", "Range", "Recommendation"]
