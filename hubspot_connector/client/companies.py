"""Companies API client."""

import logging
from typing import Any, Mapping

import httpx

from ..core.models import ClientConfig, IntegrationError
from ..products.companies import CompaniesResource, parse_integer
from .api_client import ObjectApiClient

logger = logging.getLogger(__name__)

FIND_SORTS = [{"propertyName": "id", "direction": "ASCENDING"}]
FIND_PROPERTIES = ["id"]


class CompaniesApiClient:
    """
    Find and update HubSpot companies.

    Input is validated against the company allow-list before any request
    is made; unknown properties are dropped.
    """

    def __init__(
        self,
        config: ClientConfig | Mapping[str, Any],
        http_client: httpx.Client | None = None,
    ):
        """
        Initialize the companies client.

        Args:
            config: ClientConfig, or a mapping with at least 'api_key'
            http_client: Optional httpx client (created if None)

        Raises:
            IntegrationError: If the API key is missing or empty
        """
        self.resource = CompaniesResource()
        self.api = ObjectApiClient(config, resource=self.resource, http_client=http_client)

    def close(self) -> None:
        """Close the underlying HTTP client if we created it."""
        self.api.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def find_company(self, filter: dict[str, Any]) -> str | None:
        """
        Find a company by the provided filter.

        Args:
            filter: Property name to value filter; 'merchant_id' is required

        Returns:
            ID of the first matching company, or None if nothing matched

        Raises:
            IntegrationError: If 'merchant_id' is missing, a property fails
                validation, or the request fails
        """
        # "0" counts as empty, like the other falsy values
        if not filter.get("merchant_id") or filter["merchant_id"] == "0":
            raise IntegrationError("`merchant_id` is required!")

        response = self.api.search(
            conditions=self.resource.validate_and_filter_properties(filter),
            sorts=FIND_SORTS,
            properties=FIND_PROPERTIES,
        )

        results = response.get("results") if isinstance(response, dict) else None
        if not results:
            logger.info("No company matched the filter")
            return None

        if not isinstance(results, list) or not isinstance(results[0], dict):
            raise IntegrationError("API Returned Unexpected Search Results Format.")

        return results[0].get("id")

    def update_company(self, company_id: int, properties: dict[str, Any]) -> dict[str, Any] | None:
        """
        Update a company by ID with the provided properties.

        Args:
            company_id: Company ID (positive integer)
            properties: Property name to value mapping

        Returns:
            The company's properties after the update, or None if the
            response held none

        Raises:
            IntegrationError: If the ID is not a positive integer, a property
                fails validation, or the request fails
        """
        object_id = parse_integer(company_id)
        if object_id is None or object_id <= 0:
            raise IntegrationError("Bad Company ID provided!")

        response = self.api.update(
            object_id,
            self.resource.validate_and_filter_properties(properties),
        )

        if not isinstance(response, dict):
            return None
        return response.get("properties")
