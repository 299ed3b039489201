"""
CNAME chain resolver
"""

import logging
from typing import Optional

import dns.exception
import dns.resolver

from ..errors import CNAMELookupError, ChainTooLongError


logger = logging.getLogger(__name__)

MAX_CHAIN_DEPTH = 10


def _normalize(name: str) -> str:
    return name.rstrip('.').lower()


class CNAMEResolver:
    """
    Follows CNAME records hop by hop until the chain ends.

    The chain ends when a name has no CNAME record, when the alias points
    back at the name itself, or when the answer is empty. Chains longer than
    max_depth hops raise ChainTooLongError.
    """

    def __init__(self, resolver: Optional[dns.resolver.Resolver] = None,
                 max_depth: int = MAX_CHAIN_DEPTH):
        self.max_depth = max_depth
        # Default resolver reads the platform configuration (/etc/resolv.conf)
        self._resolver = resolver or dns.resolver.Resolver()

    def _query_cname(self, name: str) -> Optional[str]:
        """
        Query the CNAME record of a single name.

        Returns:
            Alias target without trailing dot, or None if the name has no
            CNAME record
        """
        try:
            answers = self._resolver.resolve(name, 'CNAME')
        except dns.resolver.NoAnswer:
            return None
        except dns.exception.DNSException as e:
            raise CNAMELookupError(name, str(e) or type(e).__name__) from e

        for rdata in answers:
            return rdata.target.to_text().rstrip('.')
        return None

    def resolve_final_alias(self, hostname: str) -> str:
        """
        Follow the CNAME chain starting at hostname.

        Args:
            hostname: Name to start from

        Returns:
            Last name in the chain (hostname itself if it has no alias)

        Raises:
            CNAMELookupError: a lookup failed along the way
            ChainTooLongError: more than max_depth hops
        """
        if not hostname or not hostname.strip():
            raise CNAMELookupError(hostname, "empty hostname")

        current = hostname
        depth = 0

        while True:
            alias = self._query_cname(current)

            if not alias or _normalize(alias) == _normalize(current):
                return current

            if depth == self.max_depth:
                raise ChainTooLongError(hostname, self.max_depth)

            logger.debug("%s -> %s (depth %d)", current, alias, depth + 1)
            current = alias
            depth += 1
