"""
Recommendations Package

Personalized advice rules plus the general tip pool.
"""

from fintrack.recommendations.engine import (
    get_general_tips,
    get_personalized_recommendations,
    get_recommendations,
)
from fintrack.recommendations.tips import GENERAL_TIPS

__all__ = [
    "GENERAL_TIPS",
    "get_general_tips",
    "get_personalized_recommendations",
    "get_recommendations",
]
