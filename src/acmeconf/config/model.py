"""Configuration tree: accounts, their certificates, and their hostnames.

Access pattern::

    config = AcmeConfig(renewal_check_time=time(3, 30), accounts={...})
    config.validate()          # raises ConfigValidationError subclasses
    snapshot = config.copy()   # independent deep copy

Entities are plain mutable dataclasses so a loader (or a reload that
starts from :meth:`AcmeConfig.copy`) can build and edit a candidate
tree.  Once :meth:`AcmeConfig.validate` passes, the tree is treated as
an immutable snapshot and replaced wholesale, never edited in place.

Disabled accounts and certificates may carry stale or incomplete data:
their local checks are skipped and they never take part in the
tree-wide checks.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from acmeconf.config.errors import (
    DuplicateHostnameError,
    InvalidValueError,
    MissingFieldError,
    MultipleDefaultCertificatesError,
)
from acmeconf.config.hostnames import hostnames_equivalent, hostnames_fingerprint

if TYPE_CHECKING:
    from collections.abc import Iterator
    from datetime import time

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Certificate
# ---------------------------------------------------------------------------


@dataclass
class Certificate:
    """A certificate an account should obtain and keep renewed."""

    enabled: bool = True
    default_cert: bool = False
    organization: str | None = None
    hostnames: list[str] | None = field(default_factory=list)

    @property
    def primary_hostname(self) -> str | None:
        """The common name, or None when no hostnames are configured."""
        return self.hostnames[0] if self.hostnames else None

    def validate(self, *, path: str = "") -> None:
        if not self.enabled:
            return
        if not self.organization:
            raise MissingFieldError("organization", path=path)
        if not self.hostnames:
            raise MissingFieldError("hostnames", path=path)

    def equivalent_to(self, other: Certificate) -> bool:
        """True when *other* would be issued as the same certificate.

        Weaker than ``==``: non-primary hostnames are compared as a set.
        """
        return (
            self.enabled == other.enabled
            and self.default_cert == other.default_cert
            and self.organization == other.organization
            and hostnames_equivalent(self.hostnames, other.hostnames)
        )

    def definition_fingerprint(self) -> int:
        """Hash consistent with :meth:`equivalent_to`."""
        return hash(
            (
                self.enabled,
                self.default_cert,
                self.organization,
                hostnames_fingerprint(self.hostnames),
            ),
        )

    def copy(self) -> Certificate:
        return Certificate(
            enabled=self.enabled,
            default_cert=self.default_cert,
            organization=self.organization,
            hostnames=None if self.hostnames is None else list(self.hostnames),
        )


# ---------------------------------------------------------------------------
# Account
# ---------------------------------------------------------------------------


@dataclass
class Account:
    """An ACME account at one provider and the certificates it manages."""

    enabled: bool = True
    provider_url: str | None = None
    accepted_agreement_url: str | None = None
    contact_uris: list[str] | None = field(default_factory=list)
    minimum_validity_days: int = 0
    certificates: dict[str, Certificate] | None = field(default_factory=dict)

    def validate(self, *, path: str = "") -> None:
        """Check this account and each of its certificates.

        Stops at the first problem found.
        """
        if not self.enabled:
            return
        if not self.provider_url:
            raise MissingFieldError("providerUrl", path=path)
        if self.minimum_validity_days < 1:
            raise InvalidValueError(
                "minimumValidityDays",
                self.minimum_validity_days,
                "must be greater than zero",
                path=path,
            )
        if self.certificates is None:
            raise MissingFieldError("certificates", path=path)
        prefix = f"{path}.certificates" if path else "certificates"
        for name, cert in self.certificates.items():
            cert.validate(path=f"{prefix}.{name}")

    def enabled_certificates(self) -> dict[str, Certificate]:
        """Certificates that take part in issuance, keyed by name."""
        if not self.enabled or not self.certificates:
            return {}
        return {name: cert for name, cert in self.certificates.items() if cert.enabled}

    def copy(self) -> Account:
        certificates = None
        if self.certificates is not None:
            certificates = {name: cert.copy() for name, cert in self.certificates.items()}
        return Account(
            enabled=self.enabled,
            provider_url=self.provider_url,
            accepted_agreement_url=self.accepted_agreement_url,
            contact_uris=None if self.contact_uris is None else list(self.contact_uris),
            minimum_validity_days=self.minimum_validity_days,
            certificates=certificates,
        )


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


@dataclass
class AcmeConfig:
    """Root of the configuration tree.

    ``renewal_check_time`` is the time of day the scheduler checks for
    certificates due for renewal; it is only required to be present here.
    """

    renewal_check_time: time | None = None
    accounts: dict[str, Account] | None = field(default_factory=dict)

    def iter_enabled_certificates(self) -> Iterator[tuple[str, str, Certificate]]:
        """Yield ``(account_name, certificate_name, certificate)`` for the enabled subtree."""
        for account_name, account in (self.accounts or {}).items():
            for cert_name, cert in account.enabled_certificates().items():
                yield account_name, cert_name, cert

    def default_certificate(self) -> tuple[str, str, Certificate] | None:
        """Return the enabled default certificate, if one is marked."""
        for entry in self.iter_enabled_certificates():
            if entry[2].default_cert:
                return entry
        return None

    def validate(self) -> None:
        """Validate the whole tree.

        Local checks run first, account by account, and the first
        failure is raised as-is.  The two tree-wide checks (hostname
        uniqueness, single default certificate) then report every
        offender at once.
        """
        if self.renewal_check_time is None:
            raise MissingFieldError("renewalCheckTime")
        if self.accounts is None:
            raise MissingFieldError("accounts")

        for name, account in self.accounts.items():
            account.validate(path=f"accounts.{name}")

        counts = Counter(
            hostname
            for _, _, cert in self.iter_enabled_certificates()
            for hostname in cert.hostnames
        )
        duplicates = sorted(hostname for hostname, n in counts.items() if n > 1)
        if duplicates:
            raise DuplicateHostnameError(duplicates)

        defaults = [
            (account_name, cert_name)
            for account_name, cert_name, cert in self.iter_enabled_certificates()
            if cert.default_cert
        ]
        if len(defaults) > 1:
            raise MultipleDefaultCertificatesError(defaults)

        log.debug(
            "Configuration valid: %d account(s), %d enabled certificate(s)",
            len(self.accounts),
            sum(1 for _ in self.iter_enabled_certificates()),
        )

    def copy(self) -> AcmeConfig:
        accounts = None
        if self.accounts is not None:
            accounts = {name: account.copy() for name, account in self.accounts.items()}
        return AcmeConfig(renewal_check_time=self.renewal_check_time, accounts=accounts)
