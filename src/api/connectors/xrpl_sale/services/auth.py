"""Serviço de autenticação por carteira XRPL."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols import XrplSaleHttpClientProtocol


class AuthService:
    """Endpoints /auth."""

    def __init__(self, http: XrplSaleHttpClientProtocol) -> None:
        self._http = http

    async def authenticate(
        self,
        *,
        wallet_address: str,
        signature: str,
        timestamp: int,
    ) -> dict[str, Any]:
        payload = {
            "walletAddress": wallet_address,
            "signature": signature,
            "timestamp": timestamp,
        }
        return await self._http.post("/auth/wallet", json=payload)

    async def refresh(self, refresh_token: str) -> dict[str, Any]:
        return await self._http.post("/auth/refresh", json={"refreshToken": refresh_token})

    async def logout(self) -> dict[str, Any]:
        return await self._http.post("/auth/logout")

    async def get_profile(self) -> dict[str, Any]:
        return await self._http.get("/auth/profile")

    async def update_profile(self, updates: dict[str, Any]) -> dict[str, Any]:
        return await self._http.patch("/auth/profile", json=updates)

    async def generate_challenge(self, wallet_address: str) -> dict[str, Any]:
        return await self._http.post("/auth/challenge", json={"walletAddress": wallet_address})

    async def verify_wallet(
        self,
        *,
        wallet_address: str,
        signature: str,
        message: str,
    ) -> dict[str, Any]:
        payload = {
            "walletAddress": wallet_address,
            "signature": signature,
            "message": message,
        }
        return await self._http.post("/auth/verify", json=payload)

    async def get_permissions(self) -> dict[str, Any]:
        return await self._http.get("/auth/permissions")
