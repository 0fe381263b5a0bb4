"""SQLAlchemy ORM models mirroring the Supabase finance tables (read-only here)"""

import uuid
from sqlalchemy import Column, Integer, Numeric, DateTime, ForeignKey, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()


class TaxReliefCategoryRow(Base):
    """Statutory tax relief category"""

    __tablename__ = "tax_relief_category"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    code = Column(Text, nullable=False, unique=True)
    label = Column(Text, nullable=False)
    annual_limit = Column(Numeric(12, 2, asdecimal=False), nullable=False)


class TaxProfileRow(Base):
    """User's tax profile for one assessment year"""

    __tablename__ = "tax_profile"
    __table_args__ = (UniqueConstraint("user_id", "assessment_year"),)

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    assessment_year = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    claims = relationship("TaxClaimRow", back_populates="profile", cascade="all, delete-orphan")


class TaxClaimRow(Base):
    """Amount claimed under a relief category within a profile"""

    __tablename__ = "tax_claim"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    profile_id = Column(UUID(as_uuid=True), ForeignKey("tax_profile.id", ondelete="CASCADE"), nullable=False)
    category_id = Column(UUID(as_uuid=True), ForeignKey("tax_relief_category.id"), nullable=False)
    amount = Column(Numeric(12, 2, asdecimal=False), nullable=False)
    description = Column(Text, nullable=True)

    profile = relationship("TaxProfileRow", back_populates="claims")


class DebtRow(Base):
    """Outstanding loan owned by a user"""

    __tablename__ = "debt"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=True)
    principal = Column(Numeric(14, 2, asdecimal=False), nullable=False)
    apr = Column(Numeric(6, 3, asdecimal=False), nullable=False)
    term_months = Column(Integer, nullable=False)
    extra_monthly_payment = Column(Numeric(12, 2, asdecimal=False), nullable=True, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
