"""Protocolos HTTP usados pelos serviços do SDK.

Os serviços dependem deste contrato, não de httpx diretamente.
"""

from __future__ import annotations

from typing import Any, Protocol


class XrplSaleHttpClientProtocol(Protocol):
    """Contrato mínimo para invocação HTTP da API XRPL.Sale.

    Todos os métodos retornam o corpo JSON já decodificado.
    """

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any: ...

    async def post(
        self,
        path: str,
        json: Any = None,
    ) -> Any: ...

    async def patch(
        self,
        path: str,
        json: Any = None,
    ) -> Any: ...

    async def delete(self, path: str) -> Any: ...
