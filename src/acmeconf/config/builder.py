"""Build the typed configuration tree from an already-decoded mapping.

Whatever reads the configuration (YAML file, JSON document, remote
store) hands over a plain ``dict`` using the camelCase keys below; this
module checks its shape and materialises the dataclass tree::

    config = load_config(
        {
            "renewalCheckTime": "03:30",
            "accounts": {
                "letsencrypt": {
                    "providerUrl": "https://acme-v02.api.letsencrypt.org/directory",
                    "minimumValidityDays": 30,
                    "certificates": {
                        "web": {
                            "organization": "Acme Corp",
                            "hostnames": ["example.com", "www.example.com"],
                        },
                    },
                },
            },
        }
    )
"""

from __future__ import annotations

import logging
from datetime import time
from typing import TYPE_CHECKING, Any

from jsonschema import Draft202012Validator

from acmeconf.config.errors import ConfigSchemaError
from acmeconf.config.model import Account, AcmeConfig, Certificate
from acmeconf.config.schema import CONFIG_SCHEMA

if TYPE_CHECKING:
    from collections.abc import Mapping

log = logging.getLogger(__name__)

_VALIDATOR = Draft202012Validator(CONFIG_SCHEMA)


def _format_path(parts: Any) -> str:  # noqa: ANN401
    return ".".join(str(p) for p in parts) or "<root>"


def check_schema(data: Mapping[str, Any]) -> None:
    """Raise :class:`ConfigSchemaError` listing every shape violation in *data*."""
    errors = sorted(
        _VALIDATOR.iter_errors(data),
        key=lambda e: [str(p) for p in e.absolute_path],
    )
    if errors:
        raise ConfigSchemaError(
            [f"{_format_path(e.absolute_path)}: {e.message}" for e in errors],
        )


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def _build_certificate(data: Mapping[str, Any] | None) -> Certificate:
    d = data or {}
    return Certificate(
        enabled=d.get("enabled", True),
        default_cert=d.get("defaultCert", False),
        organization=d.get("organization"),
        hostnames=list(d.get("hostnames") or []),
    )


def _build_account(data: Mapping[str, Any] | None) -> Account:
    d = data or {}
    certs = d.get("certificates")
    return Account(
        enabled=d.get("enabled", True),
        provider_url=d.get("providerUrl"),
        accepted_agreement_url=d.get("acceptedAgreementUrl"),
        contact_uris=list(d.get("contactURIs") or []),
        minimum_validity_days=d.get("minimumValidityDays", 0),
        certificates=(
            None
            if certs is None
            else {name: _build_certificate(c) for name, c in certs.items()}
        ),
    )


def _build_time(value: str | None) -> time | None:
    if value is None:
        return None
    try:
        return time.fromisoformat(value)
    except ValueError as exc:
        raise ConfigSchemaError([f"renewalCheckTime: {exc}"]) from exc


def build_config(data: Mapping[str, Any]) -> AcmeConfig:
    """Check the shape of *data* and build the tree, without validating it.

    ``renewalCheckTime`` may be a :class:`datetime.time` or an
    ``HH:MM[:SS]`` string, optionally with a UTC offset
    (``Z`` or ``+HH:MM``).  Absent ``accounts`` / ``certificates``
    mappings become ``None`` so that :meth:`AcmeConfig.validate`
    reports them as missing.
    """
    raw = dict(data)
    if isinstance(raw.get("renewalCheckTime"), time):
        raw["renewalCheckTime"] = raw["renewalCheckTime"].isoformat()

    check_schema(raw)

    accounts = raw.get("accounts")
    return AcmeConfig(
        renewal_check_time=_build_time(raw.get("renewalCheckTime")),
        accounts=(
            None
            if accounts is None
            else {name: _build_account(a) for name, a in accounts.items()}
        ),
    )


def load_config(data: Mapping[str, Any]) -> AcmeConfig:
    """Build the tree from *data* and run the full validation pass."""
    config = build_config(data)
    config.validate()
    log.info(
        "Configuration loaded: %d account(s)",
        len(config.accounts or {}),
    )
    return config


# ---------------------------------------------------------------------------
# Inverse mapping
# ---------------------------------------------------------------------------


def _dump_certificate(cert: Certificate) -> dict[str, Any]:
    return {
        "enabled": cert.enabled,
        "defaultCert": cert.default_cert,
        "organization": cert.organization,
        "hostnames": None if cert.hostnames is None else list(cert.hostnames),
    }


def _dump_account(account: Account) -> dict[str, Any]:
    certs = account.certificates
    return {
        "enabled": account.enabled,
        "providerUrl": account.provider_url,
        "acceptedAgreementUrl": account.accepted_agreement_url,
        "contactURIs": None if account.contact_uris is None else list(account.contact_uris),
        "minimumValidityDays": account.minimum_validity_days,
        "certificates": (
            None if certs is None else {name: _dump_certificate(c) for name, c in certs.items()}
        ),
    }


def dump_config(config: AcmeConfig) -> dict[str, Any]:
    """Return the mapping :func:`build_config` would turn back into *config*."""
    accounts = config.accounts
    return {
        "renewalCheckTime": (
            None if config.renewal_check_time is None else config.renewal_check_time.isoformat()
        ),
        "accounts": (
            None if accounts is None else {name: _dump_account(a) for name, a in accounts.items()}
        ),
    }
