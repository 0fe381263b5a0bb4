"""Data access layer for tax and debt records"""

from typing import List, Optional
from sqlalchemy.orm import Session, selectinload
from sfms_gateway.infrastructure.database.models import TaxReliefCategoryRow, TaxProfileRow, DebtRow


class TaxReliefRepository:
    """Repository for relief categories and per-year tax profiles"""

    def __init__(self, db: Session):
        self.db = db

    def get_categories(self) -> List[TaxReliefCategoryRow]:
        """Fetch every relief category ordered by code"""
        return self.db.query(TaxReliefCategoryRow).order_by(TaxReliefCategoryRow.code).all()

    def get_profile(self, user_id: str, assessment_year: int) -> Optional[TaxProfileRow]:
        """Fetch a user's profile for a year with claims loaded"""
        return (
            self.db.query(TaxProfileRow)
            .options(selectinload(TaxProfileRow.claims))
            .filter(
                TaxProfileRow.user_id == user_id,
                TaxProfileRow.assessment_year == assessment_year,
            )
            .first()
        )


class DebtRepository:
    """Repository for user debts"""

    def __init__(self, db: Session):
        self.db = db

    def get_debts_by_user(self, user_id: str) -> List[DebtRow]:
        """Fetch all debts for a user, oldest first"""
        return (
            self.db.query(DebtRow)
            .filter(DebtRow.user_id == user_id)
            .order_by(DebtRow.created_at)
            .all()
        )
