"""Domain models - pure Python dataclasses representing finance records"""

import math
from dataclasses import dataclass, field
from typing import List, Optional
from sfms_gateway.domain.exceptions import ValidationError


@dataclass
class Debt:
    """Outstanding loan owned by a user"""

    principal: float
    apr: float  # annual percentage, 5.5 means 5.5%
    term_months: int
    extra_monthly_payment: float = 0.0
    id: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self) -> None:
        # NaN slips past every comparison below
        for name in ("principal", "apr", "extra_monthly_payment"):
            if not math.isfinite(getattr(self, name)):
                raise ValidationError(f"Debt {name} must be a finite number")
        if self.principal <= 0:
            raise ValidationError(f"Debt principal must be positive, got {self.principal}")
        if self.apr < 0:
            raise ValidationError(f"Debt APR must not be negative, got {self.apr}")
        if self.term_months <= 0:
            raise ValidationError(f"Debt term must be positive, got {self.term_months} months")
        if self.extra_monthly_payment < 0:
            raise ValidationError("Extra monthly payment must not be negative")


@dataclass
class TaxReliefCategory:
    """Statutory relief category with an annual cap"""

    id: str
    code: str
    label: str
    annual_limit: float


@dataclass
class TaxClaim:
    """Amount already claimed against a relief category"""

    category_id: str
    amount: float


@dataclass
class TaxProfile:
    """User's tax filing for one assessment year"""

    id: str
    user_id: str
    assessment_year: int
    claims: List[TaxClaim] = field(default_factory=list)


@dataclass
class DTIAnalysis:
    """Output of debt affordability analysis"""

    monthly_income: float
    total_monthly_debt_payments: float
    dti_ratio: float
    label: str  # "safe" | "borderline" | "risky"
    recommendation: str


@dataclass
class TaxReliefSuggestion:
    """Remaining relief quota for a single category"""

    category_code: str
    category_label: str
    annual_limit: float
    current_claimed: float
    remaining_quota: float
    estimated_savings: float
    suggestion: str


@dataclass
class TaxReliefReport:
    """Ranked suggestions plus totals across every category"""

    suggestions: List[TaxReliefSuggestion]
    total_remaining_quota: float
    total_estimated_savings: float
