"""Holder for the live configuration snapshot.

Usage::

    store = ConfigStore()
    store.publish(load_config(data))        # initial version

    # reload: edit a copy, validate, swap
    store.update(lambda cfg: cfg.accounts["le"].certificates.pop("old"))

    cfg = store.current                     # readers never lock

A candidate that fails validation is discarded and the previously
published snapshot stays in effect.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from acmeconf.config.diff import CertificateDiff, diff_certificates
from acmeconf.config.errors import ConfigValidationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from acmeconf.config.model import AcmeConfig

log = logging.getLogger(__name__)


class ConfigStore:
    """Publishes validated :class:`AcmeConfig` snapshots atomically.

    Parameters
    ----------
    initial:
        Optional first snapshot; validated before it is published.

    """

    def __init__(self, initial: AcmeConfig | None = None) -> None:
        self._lock = threading.Lock()
        self._current: AcmeConfig | None = None
        self._previous: AcmeConfig | None = None
        if initial is not None:
            self.publish(initial)

    @property
    def current(self) -> AcmeConfig | None:
        """The published snapshot.  Must not be mutated by callers."""
        return self._current

    @property
    def previous(self) -> AcmeConfig | None:
        """The last-known-good snapshot replaced by the latest publish."""
        return self._previous

    def snapshot(self) -> AcmeConfig:
        """Return an independent copy of the current snapshot."""
        current = self._current
        if current is None:
            msg = "No configuration has been published yet"
            raise RuntimeError(msg)
        return current.copy()

    def publish(self, candidate: AcmeConfig) -> CertificateDiff:
        """Validate *candidate* and make it the current snapshot.

        Raises the validation error unchanged if the candidate is
        rejected.  Returns the certificate diff against the snapshot
        it replaced.
        """
        with self._lock:
            return self._publish_locked(candidate)

    def update(self, mutator: Callable[[AcmeConfig], object]) -> CertificateDiff:
        """Apply *mutator* to a copy of the current snapshot and publish it."""
        with self._lock:
            if self._current is None:
                msg = "No configuration has been published yet"
                raise RuntimeError(msg)
            candidate = self._current.copy()
            mutator(candidate)
            return self._publish_locked(candidate)

    def rollback(self) -> AcmeConfig:
        """Re-publish the previous snapshot and return it."""
        with self._lock:
            if self._previous is None:
                msg = "No previous configuration to roll back to"
                raise RuntimeError(msg)
            self._current, self._previous = self._previous, self._current
            log.info("Configuration rolled back to previous snapshot")
            return self._current

    def _publish_locked(self, candidate: AcmeConfig) -> CertificateDiff:
        try:
            candidate.validate()
        except ConfigValidationError as exc:
            log.warning("Config reload rejected: %s", exc)
            raise

        diff = diff_certificates(self._current, candidate)
        self._previous = self._current
        self._current = candidate

        if diff.is_empty:
            log.info("Configuration published, no certificate changes")
        else:
            log.info(
                "Configuration published: %d added, %d changed, %d removed",
                len(diff.added),
                len(diff.changed),
                len(diff.removed),
            )
        return diff
