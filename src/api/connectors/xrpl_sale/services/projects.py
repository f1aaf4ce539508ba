"""Serviço de projetos (token sales)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols import XrplSaleHttpClientProtocol


class ProjectsService:
    """Endpoints /projects."""

    def __init__(self, http: XrplSaleHttpClientProtocol) -> None:
        self._http = http

    async def create(self, project_data: dict[str, Any]) -> dict[str, Any]:
        return await self._http.post("/projects", json=project_data)

    async def get(self, project_id: str) -> dict[str, Any]:
        return await self._http.get(f"/projects/{project_id}")

    async def list(
        self,
        *,
        page: int | None = None,
        limit: int | None = None,
        status: str | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> dict[str, Any]:
        """Lista projetos paginados (`data` + `pagination`)."""
        params = {
            "page": page,
            "limit": limit,
            "status": status,
            "sortBy": sort_by,
            "sortOrder": sort_order,
        }
        return await self._http.get("/projects", params=params)

    async def update(self, project_id: str, updates: dict[str, Any]) -> dict[str, Any]:
        return await self._http.patch(f"/projects/{project_id}", json=updates)

    async def launch(self, project_id: str) -> dict[str, Any]:
        return await self._http.post(f"/projects/{project_id}/launch")

    async def pause(self, project_id: str) -> dict[str, Any]:
        return await self._http.post(f"/projects/{project_id}/pause")

    async def resume(self, project_id: str) -> dict[str, Any]:
        return await self._http.post(f"/projects/{project_id}/resume")

    async def cancel(self, project_id: str) -> dict[str, Any]:
        return await self._http.post(f"/projects/{project_id}/cancel")

    async def get_stats(self, project_id: str) -> dict[str, Any]:
        return await self._http.get(f"/projects/{project_id}/stats")

    async def get_active(self, **options: Any) -> dict[str, Any]:
        """Atalho para list(status="active")."""
        options.pop("status", None)
        return await self.list(status="active", **options)
