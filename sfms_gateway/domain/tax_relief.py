"""Tax relief advisor - remaining quota and estimated savings per relief category"""

from collections import defaultdict
from typing import Dict, Iterable, List
from sfms_gateway.domain.models import TaxClaim, TaxReliefCategory, TaxReliefSuggestion, TaxReliefReport

# Flat marginal rate assumed for savings estimates (middle-income bands sit around 8-14%)
ASSUMED_TAX_RATE = 0.10
MAX_SUGGESTIONS = 5


def claimed_by_category(claims: Iterable[TaxClaim]) -> Dict[str, float]:
    """Total claimed amount keyed by category id"""
    totals: Dict[str, float] = defaultdict(float)
    for claim in claims:
        totals[claim.category_id] += float(claim.amount)
    return totals


def build_suggestion(category: TaxReliefCategory, current_claimed: float) -> TaxReliefSuggestion:
    """Compute remaining quota, estimated savings and advice for one category"""
    annual_limit = float(category.annual_limit)
    remaining_quota = max(0.0, annual_limit - current_claimed)
    estimated_savings = remaining_quota * ASSUMED_TAX_RATE

    if remaining_quota > 0:
        suggestion = (
            f"You can still claim RM {remaining_quota:.2f} under {category.label}. "
            f"Estimated tax savings: RM {estimated_savings:.2f}."
        )
    elif current_claimed >= annual_limit:
        suggestion = "You've maximized this relief category."
    else:
        suggestion = "Consider utilizing this relief to reduce your tax liability."

    return TaxReliefSuggestion(
        category_code=category.code,
        category_label=category.label,
        annual_limit=annual_limit,
        current_claimed=current_claimed,
        remaining_quota=remaining_quota,
        estimated_savings=estimated_savings,
        suggestion=suggestion,
    )


def suggest(
    categories: Iterable[TaxReliefCategory],
    claims: Iterable[TaxClaim],
    limit: int = MAX_SUGGESTIONS,
) -> TaxReliefReport:
    """
    Main entry point: rank relief categories by unused quota.

    Requirements:
    - Categories sorted by remaining quota, highest first (ties keep input order)
    - Only categories with quota left are suggested, at most `limit` of them
    - Totals cover every category, not just the suggested ones

    An empty claims list (no tax profile for the year) is valid input.
    """
    claimed = claimed_by_category(claims)

    all_suggestions: List[TaxReliefSuggestion] = [
        build_suggestion(category, claimed.get(category.id, 0.0))
        for category in categories
    ]
    ranked = sorted(all_suggestions, key=lambda s: s.remaining_quota, reverse=True)

    return TaxReliefReport(
        suggestions=[s for s in ranked if s.remaining_quota > 0][:limit],
        total_remaining_quota=sum(s.remaining_quota for s in all_suggestions),
        total_estimated_savings=sum(s.estimated_savings for s in all_suggestions),
    )
