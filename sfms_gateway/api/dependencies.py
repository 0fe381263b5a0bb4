"""Dependency injection for FastAPI endpoints"""

from typing import Generator
from fastapi import Request
from sfms_gateway.config import settings
from sfms_gateway.infrastructure.clients.supabase import SupabaseClient
from sfms_gateway.infrastructure.database.session import SessionLocal
from sfms_gateway.infrastructure.database.store import DatabaseRecordStore
from sfms_gateway.infrastructure.record_store import RecordStore


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_record_store(request: Request) -> Generator[RecordStore, None, None]:
    """
    Provide the configured record store for this request.

    A database session is opened only for the "database" backend and closed
    when the request finishes. The Supabase client forwards the caller's
    Authorization header so row-level security applies as that user.
    """
    if settings.record_store_backend == "database":
        db = SessionLocal()
        try:
            yield DatabaseRecordStore(db)
        finally:
            db.close()
    else:
        yield SupabaseClient(auth_token=request.headers.get("Authorization"))
