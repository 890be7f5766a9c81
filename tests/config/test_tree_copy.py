"""Tests for deep copy of the configuration tree."""

from __future__ import annotations

from datetime import time

from acmeconf.config.model import Account, AcmeConfig, Certificate


class TestCertificateCopy:
    def test_disabled_without_hostnames(self):
        """Stale disabled entries may have no hostname list at all."""
        cert = Certificate(enabled=False, hostnames=None)
        cert.validate()
        dup = cert.copy()
        assert dup.hostnames is None
        assert dup == cert

    def test_copy_is_equal_but_distinct(self, certificate_factory):
        cert = certificate_factory(default_cert=True)
        dup = cert.copy()
        assert dup == cert
        assert dup is not cert
        assert dup.hostnames is not cert.hostnames

    def test_mutating_copy_leaves_original(self, certificate_factory):
        cert = certificate_factory()
        dup = cert.copy()
        dup.hostnames.append("api.example.com")
        dup.organization = "Other"
        assert cert.hostnames == ["example.com", "www.example.com"]
        assert cert.organization == "Acme Corp"


class TestAccountCopy:
    def test_nested_containers_rebuilt(self, account_factory, certificate_factory):
        account = account_factory({"web": certificate_factory()})
        dup = account.copy()
        assert dup == account
        assert dup.certificates is not account.certificates
        assert dup.certificates["web"] is not account.certificates["web"]
        assert dup.contact_uris is not account.contact_uris

    def test_mutating_original_leaves_copy(self, account_factory, certificate_factory):
        account = account_factory({"web": certificate_factory()})
        dup = account.copy()
        account.certificates["new"] = certificate_factory(hostnames=["new.example"])
        account.contact_uris.append("mailto:other@example.com")
        account.certificates["web"].hostnames[0] = "changed.example"
        assert set(dup.certificates) == {"web"}
        assert dup.contact_uris == ["mailto:admin@example.com"]
        assert dup.certificates["web"].hostnames[0] == "example.com"

    def test_missing_certificates_stays_missing(self):
        assert Account(certificates=None).copy().certificates is None

    def test_missing_contact_uris_stays_missing(self, account_factory):
        account = account_factory(contact_uris=None)
        account.validate()
        dup = account.copy()
        assert dup.contact_uris is None
        assert dup == account


class TestConfigCopy:
    def test_field_equal_not_identical(self, minimal_config):
        dup = minimal_config.copy()
        assert dup == minimal_config
        assert dup is not minimal_config
        assert dup.accounts is not minimal_config.accounts
        assert dup.accounts["main"] is not minimal_config.accounts["main"]
        assert dup.renewal_check_time == minimal_config.renewal_check_time

    def test_hostname_mutation_isolated(self, minimal_config):
        dup = minimal_config.copy()
        dup.accounts["main"].certificates["web"].hostnames.append("extra.example")
        assert minimal_config.accounts["main"].certificates["web"].hostnames == [
            "example.com",
            "www.example.com",
        ]

    def test_account_removal_isolated(self, minimal_config):
        dup = minimal_config.copy()
        del dup.accounts["main"]
        assert "main" in minimal_config.accounts

    def test_copy_of_unvalidated_tree(self):
        """Copying never validates."""
        broken = AcmeConfig(
            renewal_check_time=None,
            accounts={"x": Account(provider_url=None, certificates={"c": Certificate()})},
        )
        dup = broken.copy()
        assert dup == broken

    def test_missing_accounts_stays_missing(self):
        assert AcmeConfig(accounts=None).copy().accounts is None

    def test_valid_tree_with_incomplete_fields_copies(self, account_factory):
        """A tree that validates can always be copied."""
        config = AcmeConfig(
            renewal_check_time=time(3, 30),
            accounts={
                "a": account_factory(
                    {"old": Certificate(enabled=False, hostnames=None)},
                    contact_uris=None,
                ),
            },
        )
        config.validate()
        dup = config.copy()
        dup.validate()
        assert dup == config
