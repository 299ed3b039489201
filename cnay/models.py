"""
Data models for cnay
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class OutcomeStatus(Enum):
    """What happened to a single hostname"""
    ACCEPTED = "accepted"
    LOOKUP_FAILED = "lookup_failed"
    ALIAS_ELSEWHERE = "alias_elsewhere"


@dataclass
class ResolvedAddress:
    """An IPv4 address and the hostname credited with it"""
    ip: str
    hostname: str


@dataclass
class HostnameOutcome:
    """Result of resolving one input hostname"""
    hostname: str
    position: int
    status: OutcomeStatus
    addresses: list[str] = field(default_factory=list)
    final_alias: Optional[str] = None  # end of the CNAME chain, if found
    error: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.status == OutcomeStatus.ACCEPTED


class ResultSet:
    """
    Unique IPv4 addresses with the hostname credited for each.

    When several hostnames resolve to the same address, the hostname that
    came first in the input keeps the credit, regardless of the order in
    which outcomes are merged.
    """

    def __init__(self):
        self._entries: dict[str, tuple[int, str]] = {}

    def merge(self, outcome: HostnameOutcome):
        """Add every address of an accepted outcome"""
        if not outcome.accepted:
            return

        for ip in outcome.addresses:
            current = self._entries.get(ip)
            if current is None or outcome.position < current[0]:
                self._entries[ip] = (outcome.position, outcome.hostname)

    def addresses(self) -> list[ResolvedAddress]:
        return [
            ResolvedAddress(ip=ip, hostname=hostname)
            for ip, (_, hostname) in self._entries.items()
        ]

    def __len__(self) -> int:
        return len(self._entries)
