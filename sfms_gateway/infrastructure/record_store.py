"""Read-only lookups shared by SupabaseClient and DatabaseRecordStore"""

from typing import List, Protocol
from sfms_gateway.domain.models import Debt, TaxProfile, TaxReliefCategory


class RecordStore(Protocol):
    async def get_tax_relief_categories(self) -> List[TaxReliefCategory]:
        """All relief categories ordered by code"""
        ...

    async def get_tax_profile(self, user_id: str, assessment_year: int) -> TaxProfile:
        """Raises NotFoundError when the user has no profile for the year"""
        ...

    async def get_debts(self, user_id: str) -> List[Debt]:
        ...
