"""Validation errors raised by the configuration tree.

Every error is a :class:`ConfigValidationError` so callers that only
care about "was the candidate rejected" can catch a single type::

    try:
        candidate.validate()
    except ConfigValidationError as exc:
        log.warning("Config reload rejected: %s", exc)
"""

from __future__ import annotations

from typing import Any


class ConfigValidationError(Exception):
    """Raised when validation finds one or more problems."""

    def __init__(self, errors: list[str]) -> None:
        """Store *errors* and build a human-readable message."""
        self.errors = errors
        body = "\n".join(f"  - {e}" for e in errors)
        super().__init__(f"Configuration validation failed:\n{body}")


def _qualify(path: str, field: str) -> str:
    return f"{path}.{field}" if path else field


# ---------------------------------------------------------------------------
# Local (per-entity) errors
# ---------------------------------------------------------------------------


class MissingFieldError(ConfigValidationError):
    """A required field is absent or empty on an enabled entity."""

    def __init__(self, field: str, *, path: str = "") -> None:
        self.field = field
        self.path = path
        super().__init__([f"{_qualify(path, field)} is required"])


class InvalidValueError(ConfigValidationError):
    """A present field violates a numeric or structural constraint."""

    def __init__(
        self,
        field: str,
        value: Any,  # noqa: ANN401
        reason: str,
        *,
        path: str = "",
    ) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        self.path = path
        super().__init__([f"{_qualify(path, field)} ({value!r}) {reason}"])


# ---------------------------------------------------------------------------
# Tree-wide errors
# ---------------------------------------------------------------------------


class DuplicateHostnameError(ConfigValidationError):
    """One or more hostnames appear in more than one enabled certificate."""

    def __init__(self, hostnames: list[str] | tuple[str, ...]) -> None:
        self.hostnames = tuple(hostnames)
        super().__init__(
            [
                "Duplicate hostnames found among accounts and certificates: "
                + ", ".join(self.hostnames),
            ],
        )


class MultipleDefaultCertificatesError(ConfigValidationError):
    """More than one enabled certificate is marked as the default."""

    def __init__(
        self,
        certificates: list[tuple[str, str]] | tuple[tuple[str, str], ...],
    ) -> None:
        self.certificates = tuple(certificates)
        super().__init__(
            [
                "Multiple certificates marked default: "
                + ", ".join(
                    f"account {account} certificate {cert}"
                    for account, cert in self.certificates
                ),
            ],
        )


class ConfigSchemaError(ConfigValidationError):
    """The raw configuration mapping does not match the expected shape."""
