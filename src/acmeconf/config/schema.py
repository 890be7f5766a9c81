"""JSON Schema describing the raw configuration mapping.

Only the *shape* is checked here (types, known keys).  Required-field
and cross-entity rules live on the model, because they depend on the
``enabled`` flags.
"""

from __future__ import annotations

from typing import Any

_TIME_OF_DAY_PATTERN = (
    r"^([01][0-9]|2[0-3]):[0-5][0-9](:[0-5][0-9](\.[0-9]{1,6})?)?"
    r"(Z|[+-]([01][0-9]|2[0-3]):[0-5][0-9])?$"
)

CERTIFICATE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "enabled": {"type": "boolean"},
        "defaultCert": {"type": "boolean"},
        "organization": {"type": ["string", "null"]},
        "hostnames": {
            "type": ["array", "null"],
            "items": {"type": "string", "minLength": 1},
        },
    },
}

ACCOUNT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "enabled": {"type": "boolean"},
        "providerUrl": {"type": ["string", "null"]},
        "acceptedAgreementUrl": {"type": ["string", "null"]},
        "contactURIs": {
            "type": ["array", "null"],
            "items": {"type": "string"},
        },
        "minimumValidityDays": {"type": "integer"},
        "certificates": {
            "type": ["object", "null"],
            "additionalProperties": CERTIFICATE_SCHEMA,
        },
    },
}

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "acmeconf configuration",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "renewalCheckTime": {
            "type": ["string", "null"],
            "pattern": _TIME_OF_DAY_PATTERN,
        },
        "accounts": {
            "type": ["object", "null"],
            "additionalProperties": ACCOUNT_SCHEMA,
        },
    },
}
