"""Configuration subsystem for acmeconf.

Public API::

    from acmeconf.config import AcmeConfig, ConfigStore, load_config

    config = load_config(raw_mapping)     # build + validate
    store = ConfigStore(config)
    snapshot = store.snapshot()           # independent deep copy
"""

from acmeconf.config.builder import build_config, check_schema, dump_config, load_config
from acmeconf.config.diff import CertificateDiff, diff_certificates
from acmeconf.config.errors import (
    ConfigSchemaError,
    ConfigValidationError,
    DuplicateHostnameError,
    InvalidValueError,
    MissingFieldError,
    MultipleDefaultCertificatesError,
)
from acmeconf.config.hostnames import hostnames_equivalent, hostnames_fingerprint
from acmeconf.config.model import Account, AcmeConfig, Certificate
from acmeconf.config.schema import CONFIG_SCHEMA
from acmeconf.config.store import ConfigStore

__all__ = [
    "CONFIG_SCHEMA",
    "Account",
    # Model
    "AcmeConfig",
    "Certificate",
    "CertificateDiff",
    "ConfigSchemaError",
    "ConfigStore",
    # Errors
    "ConfigValidationError",
    "DuplicateHostnameError",
    "InvalidValueError",
    "MissingFieldError",
    "MultipleDefaultCertificatesError",
    # Builders
    "build_config",
    "check_schema",
    "diff_certificates",
    "dump_config",
    "hostnames_equivalent",
    "hostnames_fingerprint",
    "load_config",
]
