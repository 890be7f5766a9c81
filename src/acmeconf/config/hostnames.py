"""Issuance-relevant comparison of certificate hostname lists.

The first hostname is the certificate's common name, so its position
matters.  The remaining names only end up as SANs, where order is
irrelevant::

    hostnames_equivalent(["a", "b", "c"], ["a", "c", "b"])  # True
    hostnames_equivalent(["a", "b", "c"], ["b", "a", "c"])  # False
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

_EMPTY_FINGERPRINT = hash(())


def hostnames_equivalent(a: Sequence[str], b: Sequence[str]) -> bool:
    """Return True when *a* and *b* share the primary name and the same set."""
    if not a:
        return not b
    if not b:
        return False
    if a[0] != b[0]:
        return False
    return set(a) == set(b)


def hostnames_fingerprint(hostnames: Sequence[str]) -> int:
    """Hash consistent with :func:`hostnames_equivalent`."""
    if not hostnames:
        return _EMPTY_FINGERPRINT
    return hash(hostnames[0]) ^ hash(frozenset(hostnames))
