"""
Resolution modules for cnay
"""

from .domain import registrable_domain, same_registrable_domain
from .cname import CNAMEResolver, MAX_CHAIN_DEPTH
from .address import AddressResolver
from .coordinator import Resolver, resolve_hostnames, DEFAULT_WORKERS

__all__ = [
    'registrable_domain', 'same_registrable_domain',
    'CNAMEResolver', 'MAX_CHAIN_DEPTH', 'AddressResolver',
    'Resolver', 'resolve_hostnames', 'DEFAULT_WORKERS',
]
