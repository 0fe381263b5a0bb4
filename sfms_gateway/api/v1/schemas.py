"""Pydantic schemas for API request/response validation"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Wire format is camelCase; Python side uses snake_case"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaxTipsRequest(CamelModel):
    """Request body for POST /v1/tax-tips"""

    type: str = Field(..., description="tax_tips | debt_affordability")
    user_id: str = Field(..., min_length=1, description="User identifier")
    assessment_year: Optional[int] = Field(None, gt=0, description="Defaults to the current year")
    # Strict: booleans and numeric strings are rejected; ints still accepted
    monthly_income: Optional[float] = Field(
        None, strict=True, allow_inf_nan=False, description="Required for debt_affordability"
    )


class TaxReliefSuggestionSchema(CamelModel):
    """Single ranked relief category"""

    category_code: str
    category_label: str
    annual_limit: float
    current_claimed: float
    remaining_quota: float
    estimated_savings: float
    suggestion: str


class TaxTipsData(CamelModel):
    assessment_year: int
    suggestions: List[TaxReliefSuggestionSchema]
    total_remaining_quota: float
    total_estimated_savings: float


class DTIAnalysisSchema(CamelModel):
    monthly_income: float
    total_monthly_debt_payments: float
    dti_ratio: float
    label: str
    recommendation: str


class TaxTipsResponse(CamelModel):
    """Response for type=tax_tips"""

    success: bool = True
    data: TaxTipsData


class AffordabilityResponse(CamelModel):
    """Response for type=debt_affordability"""

    success: bool = True
    data: DTIAnalysisSchema


class ErrorResponse(CamelModel):
    success: bool = False
    error: str
