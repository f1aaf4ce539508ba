"""Serviço de investimentos."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols import XrplSaleHttpClientProtocol


class InvestmentsService:
    """Endpoints /investments."""

    def __init__(self, http: XrplSaleHttpClientProtocol) -> None:
        self._http = http

    async def get(self, investment_id: str) -> dict[str, Any]:
        return await self._http.get(f"/investments/{investment_id}")

    async def list(
        self,
        *,
        page: int | None = None,
        limit: int | None = None,
        project_id: str | None = None,
        investor_account: str | None = None,
        status: str | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> dict[str, Any]:
        params = {
            "page": page,
            "limit": limit,
            "projectId": project_id,
            "investorAccount": investor_account,
            "status": status,
            "sortBy": sort_by,
            "sortOrder": sort_order,
        }
        return await self._http.get("/investments", params=params)

    async def get_by_project(self, project_id: str, **options: Any) -> dict[str, Any]:
        options.pop("project_id", None)
        return await self.list(project_id=project_id, **options)

    async def get_by_investor(self, investor_account: str, **options: Any) -> dict[str, Any]:
        options.pop("investor_account", None)
        return await self.list(investor_account=investor_account, **options)

    async def create(
        self,
        *,
        project_id: str,
        amount_xrp: str,
        investor_account: str,
        tier: int | None = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "projectId": project_id,
            "amountXRP": amount_xrp,
            "investorAccount": investor_account,
        }
        if tier is not None:
            payload["tier"] = tier
        return await self._http.post("/investments", json=payload)

    async def get_investor_summary(self, investor_account: str) -> dict[str, Any]:
        return await self._http.get(f"/investments/summary/{investor_account}")

    async def simulate(
        self,
        *,
        project_id: str,
        amount_xrp: str,
        tier: int | None = None,
    ) -> dict[str, Any]:
        """Simula um investimento (tokens, preço, taxas) sem executá-lo."""
        payload: dict[str, Any] = {"projectId": project_id, "amountXRP": amount_xrp}
        if tier is not None:
            payload["tier"] = tier
        return await self._http.post("/investments/simulate", json=payload)

    async def get_confirmed(self, **options: Any) -> dict[str, Any]:
        options.pop("status", None)
        return await self.list(status="confirmed", **options)

    async def get_pending(self, **options: Any) -> dict[str, Any]:
        options.pop("status", None)
        return await self.list(status="pending", **options)
