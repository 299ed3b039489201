import socket
from types import SimpleNamespace

import dns.name
import dns.resolver
import pytest

from cnay.resolve import AddressResolver, CNAMEResolver, Resolver


class FakeDNS:
    """
    In-memory DNS data.

    addresses: hostname -> list of IPv4/IPv6 strings (what getaddrinfo sees)
    cnames: hostname -> alias target
    Any name in neither table is NXDOMAIN.
    """

    def __init__(self, addresses=None, cnames=None):
        self.addresses = addresses or {}
        self.cnames = cnames or {}
        self.cname_queries = []

    def getaddrinfo(self, host, port, *args, **kwargs):
        if host not in self.addresses:
            raise socket.gaierror(socket.EAI_NONAME, 'Name or service not known')

        infos = []
        for ip in self.addresses[host]:
            if ':' in ip:
                infos.append((socket.AF_INET6, socket.SOCK_STREAM, 6, '', (ip, 0, 0, 0)))
            else:
                infos.append((socket.AF_INET, socket.SOCK_STREAM, 6, '', (ip, 0)))
            # getaddrinfo repeats each address per socket type
            infos.append((infos[-1][0], socket.SOCK_DGRAM, 17, '', infos[-1][4]))
        return infos

    def resolve(self, qname, rdtype):
        assert rdtype == 'CNAME'
        name = qname.rstrip('.').lower()
        self.cname_queries.append(name)

        if name in self.cnames:
            target = self.cnames[name]
            target = dns.name.root if target == '' else dns.name.from_text(target)
            return [SimpleNamespace(target=target)]

        known = set(self.addresses) | set(self.cnames.values())
        if name in known:
            raise dns.resolver.NoAnswer()
        raise dns.resolver.NXDOMAIN()


@pytest.fixture
def fake_dns():
    return FakeDNS(
        addresses={
            'example.com': ['93.184.216.34', '2606:2800:220:1:248:1893:25c8:1946'],
            'www.a.com': ['198.51.100.10', '198.51.100.11'],
            'something.a.com': ['198.51.100.10', '198.51.100.11'],
            'cname-to.b.com': ['203.0.113.5'],
            'other.c.com': ['203.0.113.5'],
            'mirror.example.org': ['93.184.216.34'],
            'v6only.example.net': ['2001:db8::1'],
        },
        cnames={
            'www.a.com': 'something.a.com',
            'cname-to.b.com': 'other.c.com',
        },
    )


@pytest.fixture
def make_resolver(fake_dns):
    def _make(workers=4):
        return Resolver(
            address_resolver=AddressResolver(getaddrinfo=fake_dns.getaddrinfo),
            cname_resolver=CNAMEResolver(resolver=fake_dns),
            workers=workers,
        )
    return _make
