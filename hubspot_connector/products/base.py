"""Base class for CRM object resources."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable

logger = logging.getLogger(__name__)

# Validates one property value and returns it coerced for the API
FieldValidator = Callable[[Any], Any]


class ObjectResource(ABC):
    """
    Abstract base class for a HubSpot CRM object type.

    Each object type (e.g., companies, contacts) supplies the path segment
    appended to the objects API root and the table of properties it accepts.
    """

    @property
    @abstractmethod
    def object_type(self) -> str:
        """
        Return the object type name used in the API path.

        Returns:
            Object type string (e.g., 'companies')
        """
        pass

    @property
    @abstractmethod
    def field_validators(self) -> dict[str, FieldValidator]:
        """
        Return the allow-list of writable/searchable properties.

        Returns:
            Mapping of property name to a validator that returns the coerced
            value or raises IntegrationError
        """
        pass

    @property
    def path_segment(self) -> str:
        """Return the sub-resource path, with trailing slash."""
        return f"{self.object_type}/"

    def validate_and_filter_properties(self, properties: dict[str, Any]) -> dict[str, Any]:
        """
        Validate and coerce properties against the allow-list.

        Properties without a validator are dropped silently.

        Args:
            properties: Property name to value mapping

        Returns:
            New mapping holding only the recognized, coerced properties

        Raises:
            IntegrationError: If a recognized property fails validation
        """
        validators = self.field_validators
        filtered = {}

        for name, value in properties.items():
            validator = validators.get(name)
            if validator is None:
                logger.debug(f"Dropping unsupported {self.object_type} property '{name}'")
                continue

            filtered[name] = validator(value)

        return filtered
