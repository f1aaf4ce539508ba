"""Serviços REST do SDK XRPL.Sale."""

from .analytics import AnalyticsService
from .auth import AuthService
from .investments import InvestmentsService
from .projects import ProjectsService
from .webhooks import WebhooksService

__all__ = [
    "AnalyticsService",
    "AuthService",
    "InvestmentsService",
    "ProjectsService",
    "WebhooksService",
]
