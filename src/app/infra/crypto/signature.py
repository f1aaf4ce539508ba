"""Assinatura e verificação HMAC-SHA256 de webhooks XRPL.Sale.

Formato do header: ``sha256=<hex minúsculo do HMAC-SHA256>``.

O digest é sempre calculado sobre os bytes brutos recebidos, antes de
qualquer decodificação JSON: re-serializar o payload não garante bytes
idênticos.
"""

from __future__ import annotations

import hashlib
import hmac

from utils.errors import ConfigurationError

SIGNATURE_PREFIX = "sha256="


def _to_bytes(value: bytes | str) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def compute_signature(payload: bytes | str, secret: str) -> str:
    """Calcula o valor do header de assinatura para o payload.

    Args:
        payload: Corpo bruto (bytes ou texto UTF-8)
        secret: Secret compartilhado do webhook

    Returns:
        String no formato ``sha256=<hex>``
    """
    digest = hmac.new(
        secret.encode("utf-8"),
        _to_bytes(payload),
        hashlib.sha256,
    ).hexdigest()
    return f"{SIGNATURE_PREFIX}{digest}"


def constant_time_equals(expected: str, received: str) -> bool:
    """Compara duas strings sem short-circuit dependente do conteúdo.

    Tamanhos diferentes retornam False de imediato; caso contrário todos
    os caracteres são visitados (XOR acumulado com OR).
    """
    if len(expected) != len(received):
        return False

    result = 0
    for left, right in zip(expected, received):
        result |= ord(left) ^ ord(right)
    return result == 0


class SignatureVerifier:
    """Verificador de assinatura com secret padrão injetado.

    O secret padrão vem da configuração explícita (nunca de estado global);
    cada chamada pode sobrescrevê-lo.

    Args:
        default_secret: Secret usado quando a chamada não informa um
    """

    def __init__(self, default_secret: str | None = None) -> None:
        self._default_secret = default_secret or None

    @property
    def has_secret(self) -> bool:
        return self._default_secret is not None

    def _resolve_secret(self, secret: str | None) -> str:
        resolved = secret or self._default_secret
        if not resolved:
            raise ConfigurationError(
                "Webhook secret is required for signature verification"
            )
        return resolved

    def sign(self, payload: bytes | str, secret: str | None = None) -> str:
        """Gera o header de assinatura para o payload."""
        return compute_signature(payload, self._resolve_secret(secret))

    def verify(
        self,
        payload: bytes | str,
        signature: str,
        secret: str | None = None,
    ) -> bool:
        """Verifica se `signature` corresponde ao HMAC do payload.

        Args:
            payload: Corpo bruto exatamente como recebido
            signature: Valor do header ``x-xrpl-sale-signature``
            secret: Secret opcional (sobrescreve o padrão)

        Raises:
            ConfigurationError: Se nenhum secret estiver disponível

        Returns:
            True se a assinatura for válida
        """
        expected = compute_signature(payload, self._resolve_secret(secret))
        return constant_time_equals(expected, signature)
