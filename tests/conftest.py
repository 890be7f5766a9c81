"""Root conftest for the acmeconf test suite."""

from __future__ import annotations

import sys
from datetime import time
from pathlib import Path
from typing import Any

import pytest

# ---------------------------------------------------------------------------
# Make ``src/`` importable without installing the package
# ---------------------------------------------------------------------------
_SRC = str(Path(__file__).resolve().parent.parent / "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from acmeconf.config.model import Account, AcmeConfig, Certificate  # noqa: E402

# ---------------------------------------------------------------------------
# Tree fixtures
# ---------------------------------------------------------------------------


def make_certificate(**overrides) -> Certificate:
    """Return a valid enabled certificate, applying *overrides*."""
    fields = {
        "organization": "Acme Corp",
        "hostnames": ["example.com", "www.example.com"],
    }
    fields.update(overrides)
    return Certificate(**fields)


_UNSET: Any = object()


def make_account(certificates: dict[str, Certificate] | None = _UNSET, **overrides) -> Account:
    """Return a valid enabled account holding *certificates*.

    Passing ``certificates=None`` builds an account with no mapping at all.
    """
    fields = {
        "provider_url": "https://acme.example/dir",
        "contact_uris": ["mailto:admin@example.com"],
        "minimum_validity_days": 30,
        "certificates": {} if certificates is _UNSET else certificates,
    }
    fields.update(overrides)
    return Account(**fields)


@pytest.fixture()
def certificate_factory():
    """Expose :func:`make_certificate` to tests."""
    return make_certificate


@pytest.fixture()
def account_factory():
    """Expose :func:`make_account` to tests."""
    return make_account


@pytest.fixture()
def minimal_config() -> AcmeConfig:
    """One account with one certificate -- the smallest valid tree."""
    return AcmeConfig(
        renewal_check_time=time(3, 30),
        accounts={"main": make_account({"web": make_certificate()})},
    )


@pytest.fixture()
def minimal_config_data() -> dict:
    """Raw mapping equivalent to :func:`minimal_config`."""
    return {
        "renewalCheckTime": "03:30",
        "accounts": {
            "main": {
                "providerUrl": "https://acme.example/dir",
                "contactURIs": ["mailto:admin@example.com"],
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
