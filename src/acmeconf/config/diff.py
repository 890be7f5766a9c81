"""Compare two configuration versions certificate by certificate.

Used on reload to decide which certificates must be (re-)issued and
which can keep their current issued certificate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from acmeconf.config.model import AcmeConfig, Certificate

CertificateKey = tuple[str, str]


@dataclass(frozen=True)
class CertificateDiff:
    """Enabled certificates classified by ``(account_name, certificate_name)``."""

    added: tuple[CertificateKey, ...] = ()
    removed: tuple[CertificateKey, ...] = ()
    changed: tuple[CertificateKey, ...] = ()
    unchanged: tuple[CertificateKey, ...] = ()

    @property
    def needs_issuance(self) -> tuple[CertificateKey, ...]:
        return self.added + self.changed

    @property
    def is_empty(self) -> bool:
        return not (self.added or self.removed or self.changed)


def _index(config: AcmeConfig | None) -> dict[CertificateKey, tuple[str | None, Certificate]]:
    if config is None:
        return {}
    return {
        (account_name, cert_name): (config.accounts[account_name].provider_url, cert)
        for account_name, cert_name, cert in config.iter_enabled_certificates()
    }


def diff_certificates(old: AcmeConfig | None, new: AcmeConfig | None) -> CertificateDiff:
    """Classify the enabled certificates of *new* against *old*.

    A certificate counts as changed when its definition is no longer
    :meth:`~acmeconf.config.model.Certificate.equivalent_to` the old
    one, or when its account now points at a different provider.
    """
    before = _index(old)
    after = _index(new)

    added: list[CertificateKey] = []
    changed: list[CertificateKey] = []
    unchanged: list[CertificateKey] = []
    for key, (provider, cert) in after.items():
        if key not in before:
            added.append(key)
            continue
        old_provider, old_cert = before[key]
        if provider != old_provider or not cert.equivalent_to(old_cert):
            changed.append(key)
        else:
            unchanged.append(key)

    removed = [key for key in before if key not in after]
    return CertificateDiff(
        added=tuple(sorted(added)),
        removed=tuple(sorted(removed)),
        changed=tuple(sorted(changed)),
        unchanged=tuple(sorted(unchanged)),
    )
