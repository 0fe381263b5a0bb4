"""Pytest fixtures for testing"""

import uuid
import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sfms_gateway.api.main import create_app
from sfms_gateway.api.dependencies import get_record_store
from sfms_gateway.domain.models import TaxReliefCategory
from sfms_gateway.infrastructure.database.models import (
    Base,
    DebtRow,
    TaxClaimRow,
    TaxProfileRow,
    TaxReliefCategoryRow,
)
from sfms_gateway.infrastructure.database.store import DatabaseRecordStore


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# (code, label, annual_limit)
RELIEF_CATEGORIES = [
    ("LIFESTYLE", "Lifestyle purchases", 2500),
    ("MEDICAL", "Medical expenses", 10000),
    ("EDUCATION", "Education fees (self)", 7000),
    ("SSPN", "SSPN net deposit", 8000),
    ("EPF_LIFE", "EPF & life insurance", 7000),
    ("PRS", "Private retirement scheme", 3000),
    ("SPORTS", "Sports equipment", 1000),
]


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client reading records from the test database"""
    app = create_app()
    app.dependency_overrides[get_record_store] = lambda: DatabaseRecordStore(db)
    return TestClient(app)


@pytest.fixture
def seeded_db(db: Session) -> Session:
    """
    Relief categories plus records for user_1:
    - 2024 profile: EPF_LIFE maxed (7000), LIFESTYLE 1500, MEDICAL 2000
    - Car loan RM12,000 at 12% over 12 months
    - Study loan RM6,000 interest-free over 60 months, RM50 extra per month
    """
    categories = {}
    for code, label, limit in RELIEF_CATEGORIES:
        row = TaxReliefCategoryRow(id=uuid.uuid4(), code=code, label=label, annual_limit=limit)
        db.add(row)
        categories[code] = row
    db.flush()

    profile = TaxProfileRow(id=uuid.uuid4(), user_id="user_1", assessment_year=2024)
    db.add(profile)
    db.flush()

    for code, amount in [("EPF_LIFE", 4000), ("EPF_LIFE", 3000), ("LIFESTYLE", 1500), ("MEDICAL", 2000)]:
        db.add(TaxClaimRow(profile_id=profile.id, category_id=categories[code].id, amount=amount))

    db.add(DebtRow(user_id="user_1", name="Car loan", principal=12000, apr=12, term_months=12))
    db.add(
        DebtRow(
            user_id="user_1",
            name="Study loan",
            principal=6000,
            apr=0,
            term_months=60,
            extra_monthly_payment=50,
        )
    )
    db.add(DebtRow(user_id="user_2", name="Credit card", principal=5000, apr=18, term_months=24))
    db.commit()
    return db


@pytest.fixture
def relief_categories() -> list[TaxReliefCategory]:
    """Relief categories as the stores return them (ordered by code)"""
    return sorted(
        [
            TaxReliefCategory(id=f"cat_{code.lower()}", code=code, label=label, annual_limit=limit)
            for code, label, limit in RELIEF_CATEGORIES
        ],
        key=lambda c: c.code,
    )
