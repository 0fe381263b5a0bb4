"""Record store backed by a direct database session"""

from typing import List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sfms_gateway.domain.models import Debt, TaxClaim, TaxProfile, TaxReliefCategory
from sfms_gateway.domain.exceptions import NotFoundError, UpstreamError, ValidationError
from sfms_gateway.infrastructure.database.repositories import TaxReliefRepository, DebtRepository


class DatabaseRecordStore:
    """Same lookups as SupabaseClient, served from SQLAlchemy repositories"""

    def __init__(self, db: Session):
        self.tax_repo = TaxReliefRepository(db)
        self.debt_repo = DebtRepository(db)

    async def get_tax_relief_categories(self) -> List[TaxReliefCategory]:
        try:
            rows = self.tax_repo.get_categories()
        except SQLAlchemyError as e:
            raise UpstreamError(f"Database error reading relief categories: {e}") from e

        return [
            TaxReliefCategory(
                id=str(row.id),
                code=row.code,
                label=row.label,
                annual_limit=float(row.annual_limit),
            )
            for row in rows
        ]

    async def get_tax_profile(self, user_id: str, assessment_year: int) -> TaxProfile:
        """
        Raises:
            NotFoundError: User has no profile for the year
        """
        try:
            row = self.tax_repo.get_profile(user_id, assessment_year)
        except SQLAlchemyError as e:
            raise UpstreamError(f"Database error reading tax profile: {e}") from e

        if row is None:
            raise NotFoundError(f"No tax profile for user {user_id} in {assessment_year}")

        return TaxProfile(
            id=str(row.id),
            user_id=row.user_id,
            assessment_year=row.assessment_year,
            claims=[TaxClaim(category_id=str(c.category_id), amount=float(c.amount)) for c in row.claims],
        )

    async def get_debts(self, user_id: str) -> List[Debt]:
        try:
            rows = self.debt_repo.get_debts_by_user(user_id)
        except SQLAlchemyError as e:
            raise UpstreamError(f"Database error reading debts: {e}") from e

        try:
            return [
                Debt(
                    id=str(row.id),
                    name=row.name,
                    principal=float(row.principal),
                    apr=float(row.apr),
                    term_months=row.term_months,
                    extra_monthly_payment=float(row.extra_monthly_payment or 0),
                )
                for row in rows
            ]
        except ValidationError as e:
            raise UpstreamError(f"Invalid debt record: {e}") from e
