"""Unit tests for the SQLAlchemy repositories and database record store"""

import pytest
from sqlalchemy.orm import Session
from sfms_gateway.domain.exceptions import NotFoundError
from sfms_gateway.infrastructure.database.repositories import DebtRepository, TaxReliefRepository
from sfms_gateway.infrastructure.database.store import DatabaseRecordStore


def test_categories_ordered_by_code(seeded_db: Session):
    rows = TaxReliefRepository(seeded_db).get_categories()
    codes = [r.code for r in rows]
    assert codes == sorted(codes)
    assert len(codes) == 7


def test_get_profile_scoped_to_user_and_year(seeded_db: Session):
    repo = TaxReliefRepository(seeded_db)

    profile = repo.get_profile("user_1", 2024)
    assert profile is not None
    assert len(profile.claims) == 4

    assert repo.get_profile("user_1", 2023) is None
    assert repo.get_profile("user_2", 2024) is None


def test_get_debts_by_user(seeded_db: Session):
    rows = DebtRepository(seeded_db).get_debts_by_user("user_1")
    assert {r.name for r in rows} == {"Car loan", "Study loan"}


async def test_store_maps_profile_claims_to_category_ids(seeded_db: Session):
    store = DatabaseRecordStore(seeded_db)
    categories = {c.code: c for c in await store.get_tax_relief_categories()}
    profile = await store.get_tax_profile("user_1", 2024)

    epf_total = sum(c.amount for c in profile.claims if c.category_id == categories["EPF_LIFE"].id)
    assert epf_total == 7000


async def test_store_missing_profile_raises_not_found(seeded_db: Session):
    with pytest.raises(NotFoundError):
        await DatabaseRecordStore(seeded_db).get_tax_profile("user_1", 2019)


async def test_store_debts_default_extra_payment(seeded_db: Session):
    debts = await DatabaseRecordStore(seeded_db).get_debts("user_1")
    by_name = {d.name: d for d in debts}

    assert by_name["Car loan"].extra_monthly_payment == 0.0
    assert by_name["Study loan"].extra_monthly_payment == 50.0
    assert by_name["Study loan"].term_months == 60
