"""Core data models for the HubSpot connector."""

from dataclasses import dataclass, field
from typing import Any

DEFAULT_API_BASE_URL = "https://api.hubapi.com/crm/v3/objects/"
DEFAULT_TIMEOUT_SECONDS = 10.0

# Only exact match is supported, so the operator is fixed
OPERATOR_EQUALS = "EQ"


class IntegrationError(Exception):
    """
    Raised for every failure of the HubSpot integration.

    Missing configuration, invalid input, transport failures and errors
    reported by the API all surface through this one type. The message is
    always prefixed so log lines can be traced back to the integration.
    """

    MESSAGE_PREFIX = "HubSpot Integration Exception: "

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        status_code: int | None = None,
    ):
        super().__init__(self.MESSAGE_PREFIX + message)
        self.cause = cause
        self.status_code = status_code


@dataclass(frozen=True)
class ClientConfig:
    """API credentials and transport settings for one client."""
    api_key: str
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    api_base_url: str = DEFAULT_API_BASE_URL

    def __post_init__(self):
        if not self.api_key:
            raise IntegrationError("API Key is required to create API Client!")
        if not isinstance(self.api_key, str):
            raise IntegrationError("API Key must be a string!")

    def to_dict(self) -> dict[str, Any]:
        """Convert ClientConfig to a dictionary."""
        return {
            "api_key": self.api_key,
            "timeout_seconds": self.timeout_seconds,
            "api_base_url": self.api_base_url,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClientConfig":
        """
        Create ClientConfig from a dictionary.

        Args:
            data: Mapping with at least a non-empty 'api_key'

        Returns:
            The ClientConfig

        Raises:
            IntegrationError: If 'api_key' is missing or empty
        """
        if not data.get("api_key"):
            raise IntegrationError("API Key is required to create API Client!")

        return cls(
            api_key=data["api_key"],
            timeout_seconds=data.get("timeout_seconds") or DEFAULT_TIMEOUT_SECONDS,
            api_base_url=data.get("api_base_url") or DEFAULT_API_BASE_URL,
        )


@dataclass
class SearchRequest:
    """
    Body of an object search call.

    Each condition becomes its own filter group with a single EQ filter,
    so several conditions are OR'd together by HubSpot.
    """
    conditions: dict[str, Any]
    sorts: list[Any]
    properties: list[str]
    query: str | None = None
    limit: int = 1
    skip: int = 0

    def validate(self) -> None:
        """Raise IntegrationError if a required part of the search is empty."""
        if not self.conditions:
            raise IntegrationError("Search Conditions are required!")

        if not self.sorts:
            raise IntegrationError("Search Sorts are required!")

        if not self.properties:
            raise IntegrationError("Search Return Properties List is required!")

    def to_dict(self) -> dict[str, Any]:
        """Render the request body expected by the search endpoint."""
        body: dict[str, Any] = {
            "filterGroups": [
                {
                    "filters": [
                        {
                            "value": value,
                            "propertyName": name,
                            "operator": OPERATOR_EQUALS,
                        }
                    ]
                }
                for name, value in self.conditions.items()
            ],
            "sorts": list(self.sorts),
            "properties": list(self.properties),
            "limit": self.limit,
            "after": self.skip,
        }

        if self.query:
            body["query"] = self.query

        return body


@dataclass
class UpdateRequest:
    """Target object and the properties to write to it."""
    object_id: int
    properties: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Render the request body expected by the update endpoint."""
        return {"properties": dict(self.properties)}
