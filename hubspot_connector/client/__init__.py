"""
HubSpot CRM object clients.

ObjectApiClient shapes and sends the raw search/update requests;
CompaniesApiClient layers the company-specific operations on top.
"""

from .api_client import ObjectApiClient
from .companies import CompaniesApiClient

__all__ = [
    "ObjectApiClient",
    "CompaniesApiClient",
]
