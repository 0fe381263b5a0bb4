"""POST /v1/tax-tips - Tax relief tips and debt affordability analysis"""

import time
import logging
from dataclasses import asdict
from typing import Union
from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from sfms_gateway.api.v1.schemas import (
    AffordabilityResponse,
    DTIAnalysisSchema,
    ErrorResponse,
    TaxReliefSuggestionSchema,
    TaxTipsData,
    TaxTipsRequest,
    TaxTipsResponse,
)
from sfms_gateway.api.dependencies import get_record_store, get_request_id
from sfms_gateway.api.errors import InvalidRequest
from sfms_gateway.domain import affordability, tax_relief
from sfms_gateway.domain.exceptions import NotFoundError, UpstreamError, ValidationError
from sfms_gateway.infrastructure.observability.metrics import (
    record_dti_analysis,
    record_store_failures_counter,
    record_tax_tips,
)
from sfms_gateway.infrastructure.observability.logging import log_analysis
from sfms_gateway.utils.date_utils import current_assessment_year

router = APIRouter()

TAX_TIPS = "tax_tips"
DEBT_AFFORDABILITY = "debt_affordability"


@router.options("/tax-tips", response_class=PlainTextResponse)
def tax_tips_preflight():
    """CORS preflight; headers are added by CORSHeadersMiddleware"""
    return "ok"


async def build_tax_tips(request_body: TaxTipsRequest, store) -> TaxTipsResponse:
    year = request_body.assessment_year or current_assessment_year()

    try:
        profile = await store.get_tax_profile(request_body.user_id, year)
        claims = profile.claims
    except NotFoundError:
        # No filing for this year yet: every category is unclaimed
        claims = []

    categories = await store.get_tax_relief_categories()
    report = tax_relief.suggest(categories, claims)

    return TaxTipsResponse(
        data=TaxTipsData(
            assessment_year=year,
            suggestions=[TaxReliefSuggestionSchema(**asdict(s)) for s in report.suggestions],
            total_remaining_quota=report.total_remaining_quota,
            total_estimated_savings=report.total_estimated_savings,
        )
    )


async def build_affordability(request_body: TaxTipsRequest, store) -> AffordabilityResponse:
    # Zero income counts as missing here; the analyzer alone would report it as "safe"
    if not request_body.monthly_income:
        raise ValidationError("monthlyIncome is required for debt affordability analysis")

    debts = await store.get_debts(request_body.user_id)
    analysis = affordability.analyze(request_body.monthly_income, debts)

    return AffordabilityResponse(data=DTIAnalysisSchema(**asdict(analysis)))


@router.post(
    "/tax-tips",
    response_model=Union[TaxTipsResponse, AffordabilityResponse],
    responses={400: {"model": ErrorResponse}},
)
async def create_tax_tips(
    request_body: TaxTipsRequest,
    request: Request,
    store=Depends(get_record_store),
):
    """
    Tax planning insights and debt affordability analysis for a user.

    Flow:
    1. Dispatch on request type
    2. Fetch the user's records from the record store (read-only)
    3. Run the pure domain analysis
    4. Record metrics and logs, return {success, data}
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        if request_body.type == TAX_TIPS:
            response = await build_tax_tips(request_body, store)
            record_tax_tips(response.data.total_remaining_quota)
            outcome = f"{len(response.data.suggestions)} suggestions"
        elif request_body.type == DEBT_AFFORDABILITY:
            response = await build_affordability(request_body, store)
            record_dti_analysis(response.data.label)
            outcome = response.data.label
        else:
            raise ValidationError(f"Unknown request type: {request_body.type}")

    except UpstreamError as e:
        record_store_failures_counter.inc()
        logging.error(f"Record store error: {e}", extra={"request_id": request_id})
        raise InvalidRequest(str(e))

    except ValidationError as e:
        logging.warning(f"Invalid request: {e}", extra={"request_id": request_id})
        raise InvalidRequest(str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise InvalidRequest(str(e))

    duration_ms = (time.time() - start_time) * 1000
    log_analysis(request_id, request_body.user_id, request_body.type, outcome, duration_ms)

    return response
