"""acmeconf: validated configuration tree for an ACME certificate manager."""

from acmeconf.config import (
    Account,
    AcmeConfig,
    Certificate,
    CertificateDiff,
    ConfigSchemaError,
    ConfigStore,
    ConfigValidationError,
    DuplicateHostnameError,
    InvalidValueError,
    MissingFieldError,
    MultipleDefaultCertificatesError,
    build_config,
    diff_certificates,
    dump_config,
    load_config,
)

__version__ = "0.1.0"

__all__ = [
    "Account",
    "AcmeConfig",
    "Certificate",
    "CertificateDiff",
    "ConfigSchemaError",
    "ConfigStore",
    "ConfigValidationError",
    "DuplicateHostnameError",
    "InvalidValueError",
    "MissingFieldError",
    "MultipleDefaultCertificatesError",
    "__version__",
    "build_config",
    "diff_certificates",
    "dump_config",
    "load_config",
]
