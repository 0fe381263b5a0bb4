"""Supabase (PostgREST) HTTP client for reading a user's finance records"""

from typing import Any, Dict, List, Optional
import httpx
from sfms_gateway.domain.models import Debt, TaxClaim, TaxProfile, TaxReliefCategory
from sfms_gateway.domain.exceptions import NotFoundError, UpstreamError, ValidationError
from sfms_gateway.config import settings
from sfms_gateway.infrastructure.observability.metrics import record_store_latency_histogram


def parse_category(row: Dict[str, Any]) -> TaxReliefCategory:
    return TaxReliefCategory(
        id=str(row["id"]),
        code=row["code"],
        label=row["label"],
        annual_limit=float(row["annual_limit"]),
    )


def parse_claim(row: Dict[str, Any]) -> TaxClaim:
    return TaxClaim(category_id=str(row["category_id"]), amount=float(row["amount"]))


def parse_profile(row: Dict[str, Any]) -> TaxProfile:
    return TaxProfile(
        id=str(row["id"]),
        user_id=row["user_id"],
        assessment_year=int(row["assessment_year"]),
        claims=[parse_claim(c) for c in row.get("tax_claim") or []],
    )


def parse_debt(row: Dict[str, Any]) -> Debt:
    return Debt(
        id=str(row["id"]) if row.get("id") is not None else None,
        name=row.get("name"),
        principal=float(row["principal"]),
        apr=float(row["apr"]),
        term_months=int(row["term_months"]),
        # Nullable column: missing extra payment means none
        extra_monthly_payment=float(row.get("extra_monthly_payment") or 0),
    )


class SupabaseClient:
    """Read-only client for the Supabase REST API (tables are user-scoped via RLS)"""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        auth_token: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.supabase_url).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.supabase_anon_key
        # Forward the caller's JWT so row-level security applies as that user
        self.auth_token = auth_token or f"Bearer {self.api_key}"
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "apikey": self.api_key,
            "Authorization": self.auth_token,
            "Accept": "application/json",
        }

    async def _select(self, table: str, params: Dict[str, str]) -> List[Dict[str, Any]]:
        """
        Run a PostgREST select and return the rows.

        Raises:
            UpstreamError: On timeout, HTTP errors, or a non-list response
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                with record_store_latency_histogram.time():
                    response = await client.get(
                        f"{self.base_url}/rest/v1/{table}",
                        params=params,
                        headers=self.headers,
                    )
                response.raise_for_status()
                rows = response.json()
            except httpx.TimeoutException as e:
                raise UpstreamError(f"Record store timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise UpstreamError(f"Record store error on {table}: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise UpstreamError(f"Record store unreachable: {e}") from e
            except ValueError as e:
                raise UpstreamError(f"Invalid JSON from record store: {e}") from e

        if not isinstance(rows, list):
            raise UpstreamError(f"Unexpected response shape from {table}")
        return rows

    async def get_tax_relief_categories(self) -> List[TaxReliefCategory]:
        """Fetch all relief categories ordered by code"""
        rows = await self._select("tax_relief_category", {"select": "*", "order": "code.asc"})
        try:
            return [parse_category(row) for row in rows]
        except (KeyError, ValueError, TypeError) as e:
            raise UpstreamError(f"Invalid tax relief category data: {e}") from e

    async def get_tax_profile(self, user_id: str, assessment_year: int) -> TaxProfile:
        """
        Fetch the user's tax profile for a year with its claims embedded.

        Raises:
            NotFoundError: User has no profile for the year
            UpstreamError: Lookup failed or rows are malformed
        """
        rows = await self._select(
            "tax_profile",
            {
                "select": "*,tax_claim(*)",
                "user_id": f"eq.{user_id}",
                "assessment_year": f"eq.{assessment_year}",
                "limit": "1",
            },
        )
        if not rows:
            raise NotFoundError(f"No tax profile for user {user_id} in {assessment_year}")
        try:
            return parse_profile(rows[0])
        except (KeyError, ValueError, TypeError) as e:
            raise UpstreamError(f"Invalid tax profile data: {e}") from e

    async def get_debts(self, user_id: str) -> List[Debt]:
        """Fetch all active debts for a user"""
        rows = await self._select("debt", {"select": "*", "user_id": f"eq.{user_id}"})
        try:
            return [parse_debt(row) for row in rows]
        except (KeyError, ValueError, TypeError, ValidationError) as e:
            raise UpstreamError(f"Invalid debt data: {e}") from e
