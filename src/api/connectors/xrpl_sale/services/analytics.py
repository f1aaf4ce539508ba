"""Serviço de analytics da plataforma."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from app.protocols import XrplSaleHttpClientProtocol

TrendPeriod = Literal["24h", "7d", "30d", "90d"]


class AnalyticsService:
    """Endpoints /analytics."""

    def __init__(self, http: XrplSaleHttpClientProtocol) -> None:
        self._http = http

    async def get_platform_analytics(self) -> dict[str, Any]:
        return await self._http.get("/analytics/platform")

    async def get_project_analytics(
        self,
        project_id: str,
        *,
        start_date: str | None = None,
        end_date: str | None = None,
        granularity: str | None = None,
    ) -> dict[str, Any]:
        params = {
            "startDate": start_date,
            "endDate": end_date,
            "granularity": granularity,
        }
        return await self._http.get(f"/analytics/projects/{project_id}", params=params)

    async def get_investor_analytics(self, investor_account: str) -> dict[str, Any]:
        return await self._http.get(f"/analytics/investors/{investor_account}")

    async def get_market_trends(self, period: TrendPeriod = "30d") -> dict[str, Any]:
        return await self._http.get("/analytics/trends", params={"period": period})

    async def get_tier_analytics(self) -> dict[str, Any]:
        return await self._http.get("/analytics/tiers")

    async def export_data(
        self,
        *,
        type: str,
        format: str,
        start_date: str | None = None,
        end_date: str | None = None,
        project_id: str | None = None,
    ) -> dict[str, Any]:
        """Solicita exportação; retorna `downloadUrl` e `expiresAt`."""
        payload: dict[str, Any] = {"type": type, "format": format}
        optional = {"startDate": start_date, "endDate": end_date, "projectId": project_id}
        payload.update({key: value for key, value in optional.items() if value})
        return await self._http.post("/analytics/export", json=payload)
