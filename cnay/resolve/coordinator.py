"""
Resolution orchestrator
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Iterable, Optional

from ..errors import AddressLookupError, ChainTooLongError, CNAMELookupError
from ..models import HostnameOutcome, OutcomeStatus, ResultSet
from ..output.formatter import format_results
from .address import AddressResolver
from .cname import CNAMEResolver
from .domain import same_registrable_domain


logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 32


class Resolver:
    """
    Resolves many hostnames concurrently.

    Each hostname is an independent task on a bounded thread pool. Finished
    tasks hand their outcome back to the calling thread, which is the only
    writer of the ResultSet.
    """

    def __init__(
        self,
        address_resolver: Optional[AddressResolver] = None,
        cname_resolver: Optional[CNAMEResolver] = None,
        workers: int = DEFAULT_WORKERS
    ):
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")

        self.address_resolver = address_resolver or AddressResolver()
        self.cname_resolver = cname_resolver or CNAMEResolver()
        self.workers = workers

    def resolve_one(self, hostname: str, position: int = 0) -> HostnameOutcome:
        """Run the lookup and alias check for a single hostname"""
        try:
            addresses = self.address_resolver.lookup_ipv4(hostname)
        except AddressLookupError as e:
            logger.debug("Error resolving %s: %s", hostname, e.message)
            return HostnameOutcome(
                hostname=hostname,
                position=position,
                status=OutcomeStatus.LOOKUP_FAILED,
                error=e.message
            )

        final_alias = None
        try:
            final_alias = self.cname_resolver.resolve_final_alias(hostname)
        except ChainTooLongError as e:
            logger.debug("%s: %s, treating as not aliased", hostname, e.message)
        except CNAMELookupError as e:
            logger.debug("No CNAME for %s: %s", hostname, e.message)

        # A chain that never left the hostname is not an alias, even when
        # the name has no registrable domain (e.g. "localhost")
        aliased = (
            final_alias is not None
            and final_alias.rstrip('.').lower() != hostname.rstrip('.').lower()
        )
        if aliased and not same_registrable_domain(hostname, final_alias):
            logger.debug("%s is an alias for %s, skipping", hostname, final_alias)
            return HostnameOutcome(
                hostname=hostname,
                position=position,
                status=OutcomeStatus.ALIAS_ELSEWHERE,
                final_alias=final_alias
            )

        return HostnameOutcome(
            hostname=hostname,
            position=position,
            status=OutcomeStatus.ACCEPTED,
            addresses=addresses,
            final_alias=final_alias
        )

    def resolve_all(
        self,
        hostnames: Iterable[str],
        on_result: Optional[Callable[[HostnameOutcome], None]] = None
    ) -> ResultSet:
        """
        Resolve every hostname and collect the accepted addresses.

        Args:
            hostnames: Hostnames in input order
            on_result: Optional callback, called once per finished hostname

        Returns:
            ResultSet with each IPv4 address at most once
        """
        hostnames = list(hostnames)
        result_set = ResultSet()

        if not hostnames:
            return result_set

        workers = min(self.workers, len(hostnames))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(self.resolve_one, hostname, position)
                for position, hostname in enumerate(hostnames)
            ]

            for future in as_completed(futures):
                outcome = future.result()
                result_set.merge(outcome)

                if on_result:
                    on_result(outcome)

        logger.debug(
            "Resolved %d hostnames into %d unique addresses",
            len(hostnames), len(result_set)
        )
        return result_set


def resolve_hostnames(
    hostnames: Iterable[str],
    show_hostname: bool = False,
    workers: int = DEFAULT_WORKERS,
    on_result: Optional[Callable[[HostnameOutcome], None]] = None,
    resolver: Optional[Resolver] = None
) -> list[str]:
    """
    Resolve hostnames and return the sorted, formatted output lines.

    Args:
        hostnames: Hostnames in input order
        show_hostname: Append " [hostname]" to each address
        workers: Thread pool size (ignored when resolver is given)
        on_result: Optional per-hostname progress callback
        resolver: Preconfigured Resolver to use

    Returns:
        Lexicographically sorted output lines
    """
    resolver = resolver or Resolver(workers=workers)
    result_set = resolver.resolve_all(hostnames, on_result=on_result)
    return format_results(result_set, show_hostname=show_hostname)
