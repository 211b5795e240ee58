"""CRM object resources supported by the connector."""

from .base import ObjectResource
from .companies import CompaniesResource

__all__ = ["ObjectResource", "CompaniesResource"]
