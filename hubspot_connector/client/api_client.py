"""
CRM Objects API Client

Shared request building for HubSpot CRM v3 object endpoints: credential
attachment, search and update bodies, JSON decoding and error normalization.
"""

import logging
from typing import Any, Mapping
from urllib.parse import quote, quote_plus

import httpx

from ..core.models import ClientConfig, IntegrationError, SearchRequest, UpdateRequest
from ..products.base import ObjectResource

logger = logging.getLogger(__name__)

API_KEY_PARAM = "hapikey"
ENDPOINT_SEARCH = "search"


class ObjectApiClient:
    """
    Client for the search and update requests of one CRM object type.

    Features:
    - Base URL built from the objects root and the resource path segment
    - API key passed as a query parameter on every call
    - Every failure normalized into IntegrationError (no retries)
    """

    def __init__(
        self,
        config: ClientConfig | Mapping[str, Any],
        resource: ObjectResource | None = None,
        http_client: httpx.Client | None = None,
    ):
        """
        Initialize the API client.

        Args:
            config: ClientConfig, or a mapping with at least 'api_key'
            resource: Object resource supplying the path segment
            http_client: Optional httpx client (created if None)

        Raises:
            IntegrationError: If the API key is missing or empty
        """
        self.config = self._configure(config)
        self.resource = resource

        # Track if we own the HTTP client (for cleanup)
        self._owns_client = http_client is None

        if http_client is None:
            self.http_client = httpx.Client(timeout=self.config.timeout_seconds)
        else:
            self.http_client = http_client

    @staticmethod
    def _configure(config: ClientConfig | Mapping[str, Any]) -> ClientConfig:
        if isinstance(config, ClientConfig):
            return config
        return ClientConfig.from_dict(dict(config))

    def close(self) -> None:
        """Close the HTTP client if we created it."""
        if self._owns_client and self.http_client:
            self.http_client.close()

    def __enter__(self):
        """Context manager support."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager cleanup."""
        self.close()
        return False

    @property
    def base_url(self) -> str:
        """Objects API root, extended with the resource path segment if any."""
        if self.resource is None:
            return self.config.api_base_url
        return self.config.api_base_url + self.resource.path_segment

    def _credentials_params(self) -> dict[str, str]:
        return {API_KEY_PARAM: self.config.api_key}

    def _mask(self, text: str) -> str:
        """Hide the API key, raw or URL-encoded, in text taken from transport errors."""
        api_key = self.config.api_key
        for form in (api_key, quote(api_key, safe=""), quote_plus(api_key)):
            text = text.replace(form, "***")
        return text

    def _api_error(self, error: httpx.HTTPStatusError) -> IntegrationError:
        """
        Build an IntegrationError from a non-2xx response.

        Uses HubSpot's error body (status, message, correlationId) when the
        response carries one.
        """
        status_code = error.response.status_code

        try:
            detail = error.response.json()
        except ValueError:
            detail = None

        if isinstance(detail, dict) and detail.get("status"):
            return IntegrationError(
                f"API Returned Error [{detail['status']}]: {detail.get('message') or ''} "
                f"(correlationId:{detail.get('correlationId') or ''}).",
                cause=error,
                status_code=status_code,
            )

        return IntegrationError(
            f"API Request Failed. Details: {self._mask(str(error))}",
            cause=error,
            status_code=status_code,
        )

    def _request(
        self,
        method: str,
        action: str,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Make an authenticated HTTP request and decode the JSON response.

        Args:
            method: HTTP method (POST, PATCH)
            action: Path relative to base_url
            params: Extra query parameters
            json_body: JSON request body

        Returns:
            Response JSON as dict ({} for an empty body)

        Raises:
            IntegrationError: On transport failure, non-2xx response or
                undecodable body
        """
        url = self.base_url + action

        # at least the credentials travel in the query string
        query = dict(params or {})
        query.update(self._credentials_params())

        logger.debug(f"{method} {url}")

        try:
            response = self.http_client.request(
                method=method,
                url=url,
                params=query,
                json=json_body or None,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            error = self._api_error(e)
            logger.warning(str(error))
            raise error from e
        except httpx.HTTPError as e:
            error = IntegrationError(
                f"API Request Failed. Details: {self._mask(str(e))}",
                cause=e,
            )
            logger.warning(str(error))
            raise error from e

        if not response.content:
            return {}

        try:
            return response.json()
        except ValueError as e:
            raise IntegrationError(
                "API Response could not be decoded.",
                cause=e,
                status_code=response.status_code,
            ) from e

    def search(
        self,
        conditions: dict[str, Any],
        sorts: list[Any],
        properties: list[str],
        query: str | None = None,
        limit: int = 1,
        skip: int = 0,
    ) -> dict[str, Any]:
        """
        Search objects by exact-match conditions.

        Args:
            conditions: Property name to value filter (EQ only)
            sorts: Sort specifications
            properties: Names of properties to return
            query: Optional free-text search query
            limit: Maximum number of results
            skip: Number of records to skip

        Returns:
            Decoded search response (normally with a 'results' list)

        Raises:
            IntegrationError: If conditions, sorts or properties are empty,
                or the request fails
        """
        request = SearchRequest(
            conditions=conditions,
            sorts=sorts,
            properties=properties,
            query=query,
            limit=limit,
            skip=skip,
        )
        request.validate()

        return self._request("POST", ENDPOINT_SEARCH, json_body=request.to_dict())

    def update(self, object_id: int, properties: dict[str, Any]) -> dict[str, Any]:
        """
        Update an object's properties.

        Args:
            object_id: Object identifier
            properties: Properties to write

        Returns:
            Decoded update response (normally with a 'properties' mapping)
        """
        request = UpdateRequest(object_id=object_id, properties=properties)

        return self._request("PATCH", str(request.object_id), json_body=request.to_dict())
