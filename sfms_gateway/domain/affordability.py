"""Debt affordability analysis - monthly debt service and debt-to-income ratio"""

import math
from decimal import Decimal
from numbers import Real
from typing import Iterable
from sfms_gateway.domain.models import Debt, DTIAnalysis
from sfms_gateway.domain.exceptions import ValidationError

SAFE_DTI_CEILING = 0.36
BORDERLINE_DTI_CEILING = 0.43

SAFE_RECOMMENDATION = (
    "Your debt-to-income ratio is healthy. "
    "You have good financial flexibility for savings and investments."
)
BORDERLINE_RECOMMENDATION = (
    "Your debt-to-income ratio is borderline. "
    "Consider paying down debts or increasing income before taking on additional debt."
)
RISKY_RECOMMENDATION = (
    "Your debt-to-income ratio is high. Focus on debt reduction and avoid new debt. "
    "Consider debt consolidation or financial counseling."
)


def monthly_payment(debt: Debt) -> float:
    """
    Fixed monthly amortized payment for a debt, excluding extra payments.

    Standard annuity formula:
        r = apr / 12 / 100
        payment = principal * r * (1 + r)^n / ((1 + r)^n - 1)

    Interest-free debts are split evenly over the term.
    """
    principal = float(debt.principal)
    apr = float(debt.apr)
    months = debt.term_months

    if apr == 0:
        return principal / months

    monthly_rate = apr / 12 / 100
    growth = (1 + monthly_rate) ** months
    return principal * (monthly_rate * growth) / (growth - 1)


def total_monthly_debt_payments(debts: Iterable[Debt]) -> float:
    """Sum of amortized payment plus extra payment across all debts"""
    total = 0.0
    for debt in debts:
        if not isinstance(debt, Debt):
            raise ValidationError(f"Expected Debt record, got {type(debt).__name__}")
        total += monthly_payment(debt) + float(debt.extra_monthly_payment or 0)
    return total


def classify_dti(dti_ratio: float) -> tuple[str, str]:
    """
    Map a DTI ratio to a label and recommendation.

    Bands:
    - below 0.36:        safe
    - 0.36 up to 0.43:   borderline (0.36 itself is borderline)
    - 0.43 and above:    risky

    Returns: (label, recommendation)
    """
    if dti_ratio < SAFE_DTI_CEILING:
        return "safe", SAFE_RECOMMENDATION
    elif dti_ratio < BORDERLINE_DTI_CEILING:
        return "borderline", BORDERLINE_RECOMMENDATION
    else:
        return "risky", RISKY_RECOMMENDATION


def analyze(monthly_income: float, debts: Iterable[Debt]) -> DTIAnalysis:
    """
    Main entry point: compute monthly debt service and DTI classification.

    Income that is zero or negative yields a ratio of 0 (and therefore "safe").
    Callers that care should reject such income before calling.

    Raises:
        ValidationError: income is not a finite number or debts is not iterable
    """
    if isinstance(monthly_income, bool) or not isinstance(monthly_income, (Real, Decimal)):
        raise ValidationError("monthlyIncome must be a number")

    try:
        debt_list = list(debts)
    except TypeError as e:
        raise ValidationError("debts must be a list of debt records") from e

    income = float(monthly_income)
    if not math.isfinite(income):
        raise ValidationError("monthlyIncome must be a finite number")

    total = total_monthly_debt_payments(debt_list)
    dti_ratio = total / income if income > 0 else 0.0
    label, recommendation = classify_dti(dti_ratio)

    return DTIAnalysis(
        monthly_income=income,
        total_monthly_debt_payments=total,
        dti_ratio=dti_ratio,
        label=label,
        recommendation=recommendation,
    )
