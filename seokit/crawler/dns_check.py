"""DNS existence check run before any HTTP traffic is sent to a domain."""

from __future__ import annotations

import logging
from typing import Optional

import dns.exception
import dns.resolver

from seokit.config import settings

logger = logging.getLogger(__name__)

# Tried in order; the first record type that yields an answer wins.
_RECORD_TYPES = ("A", "AAAA", "CNAME", "ANY")

# "No such record" outcomes: no-data, not-found, and server-fail / refused
# (dnspython reports the last two as NoNameservers).
_BENIGN_ERRORS = (
    dns.resolver.NoAnswer,
    dns.resolver.NXDOMAIN,
    dns.resolver.NoNameservers,
)


def domain_exists(domain: str, resolver: Optional[dns.resolver.Resolver] = None) -> bool:
    """Return ``True`` if *domain* has at least one A, AAAA, CNAME or ANY record.

    Resolver errors never propagate: a benign absence is logged at DEBUG,
    anything else (timeouts, malformed names) at WARNING, and the next record
    type is tried either way.
    """
    if resolver is None:
        try:
            resolver = dns.resolver.Resolver()
        except dns.exception.DNSException as exc:
            # e.g. NoResolverConfiguration when /etc/resolv.conf is missing
            logger.warning("Cannot configure DNS resolver for %s: %s", domain, exc)
            return False
    resolver.lifetime = settings.dns_timeout

    for rdtype in _RECORD_TYPES:
        try:
            answer = resolver.resolve(domain, rdtype)
        except _BENIGN_ERRORS as exc:
            logger.debug("No %s record for %s: %s", rdtype, domain, exc)
            continue
        except dns.exception.DNSException as exc:
            logger.warning("DNS %s lookup for %s failed: %s", rdtype, domain, exc)
            continue

        if answer:
            logger.debug("%s resolves via %s record", domain, rdtype)
            return True

    return False
