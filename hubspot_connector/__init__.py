"""HubSpot CRM companies connector."""

from .core import ClientConfig, IntegrationError, load_config
from .client import ObjectApiClient, CompaniesApiClient

__all__ = [
    "ClientConfig",
    "IntegrationError",
    "load_config",
    "ObjectApiClient",
    "CompaniesApiClient",
]
