"""HubSpot companies object resource."""

import re
from typing import Any

from hubspot_connector.core.models import IntegrationError
from .base import FieldValidator, ObjectResource

RISK_TAG_SEPARATOR = ";"

_INTEGER_PATTERN = re.compile(r"[+-]?(0|[1-9][0-9]*)")


def parse_integer(value: Any) -> int | None:
    """
    Parse an integer-like value.

    Accepts ints, integral floats and strings holding a plain decimal
    integer (surrounding whitespace allowed, no leading zeros).

    Args:
        value: Value to parse

    Returns:
        The integer, or None if the value is not integer-like
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str) and _INTEGER_PATTERN.fullmatch(value.strip()):
        return int(value.strip())
    return None


def validate_merchant_id(value: Any) -> int:
    merchant_id = parse_integer(value)
    # zero is rejected along with non-integers
    if not merchant_id:
        raise IntegrationError("`merchant_id` field did not pass validation!")
    return merchant_id


def validate_company_risk_tag(value: Any) -> Any:
    if not value:
        raise IntegrationError("`company_risk_tag` empty provided!")

    if isinstance(value, (list, tuple)):
        return RISK_TAG_SEPARATOR.join(str(tag) for tag in value)
    return value


def validate_domain(value: Any) -> Any:
    if not value:
        raise IntegrationError("`domain` empty provided!")
    return value


class CompaniesResource(ObjectResource):
    """Companies object: path segment and the accepted company properties."""

    @property
    def object_type(self) -> str:
        return "companies"

    @property
    def field_validators(self) -> dict[str, FieldValidator]:
        return {
            "merchant_id": validate_merchant_id,
            "company_risk_tag": validate_company_risk_tag,
            "domain": validate_domain,
        }
