import dns.exception
import dns.resolver
import pytest

from cnay.errors import ChainTooLongError, CNAMELookupError
from cnay.resolve.cname import CNAMEResolver, MAX_CHAIN_DEPTH

from conftest import FakeDNS


def chain(length):
    """h0 -> h1 -> ... -> h<length>, where the last name has an A record"""
    cnames = {f'h{i}.chain.com': f'h{i + 1}.chain.com' for i in range(length)}
    return FakeDNS(addresses={f'h{length}.chain.com': ['192.0.2.1']}, cnames=cnames)


def test_no_cname_returns_hostname(fake_dns):
    resolver = CNAMEResolver(resolver=fake_dns)
    assert resolver.resolve_final_alias('example.com') == 'example.com'


def test_single_hop(fake_dns):
    resolver = CNAMEResolver(resolver=fake_dns)
    assert resolver.resolve_final_alias('www.a.com') == 'something.a.com'


def test_multi_hop():
    fake = FakeDNS(
        addresses={'edge.cdn.net': ['192.0.2.7']},
        cnames={'www.shop.com': 'shop.lb.com', 'shop.lb.com': 'edge.cdn.net'},
    )
    assert CNAMEResolver(resolver=fake).resolve_final_alias('www.shop.com') == 'edge.cdn.net'


def test_self_reference_ends_chain():
    fake = FakeDNS(cnames={'loop.example.com': 'Loop.Example.com.'})
    resolver = CNAMEResolver(resolver=fake)
    assert resolver.resolve_final_alias('loop.example.com') == 'loop.example.com'


def test_empty_alias_ends_chain():
    fake = FakeDNS(cnames={'empty.example.com': ''})
    resolver = CNAMEResolver(resolver=fake)
    assert resolver.resolve_final_alias('empty.example.com') == 'empty.example.com'


def test_nxdomain_raises():
    resolver = CNAMEResolver(resolver=FakeDNS())
    with pytest.raises(CNAMELookupError):
        resolver.resolve_final_alias('missing.example.com')


def test_lookup_error_midway_raises():
    class Dangling(FakeDNS):
        def resolve(self, qname, rdtype):
            if qname == 'gone.z.com':
                raise dns.resolver.NXDOMAIN()
            return super().resolve(qname, rdtype)

    fake = Dangling(cnames={'www.x.com': 'gone.z.com'})
    resolver = CNAMEResolver(resolver=fake)
    with pytest.raises(CNAMELookupError) as excinfo:
        resolver.resolve_final_alias('www.x.com')
    assert not isinstance(excinfo.value, ChainTooLongError)


def test_empty_hostname_raises():
    resolver = CNAMEResolver(resolver=FakeDNS())
    with pytest.raises(CNAMELookupError):
        resolver.resolve_final_alias('')


def test_chain_at_depth_limit_resolves():
    fake = chain(MAX_CHAIN_DEPTH)
    resolver = CNAMEResolver(resolver=fake)
    assert resolver.resolve_final_alias('h0.chain.com') == f'h{MAX_CHAIN_DEPTH}.chain.com'


def test_chain_beyond_depth_limit_raises():
    fake = chain(MAX_CHAIN_DEPTH + 1)
    resolver = CNAMEResolver(resolver=fake)
    with pytest.raises(ChainTooLongError) as excinfo:
        resolver.resolve_final_alias('h0.chain.com')
    assert excinfo.value.max_depth == MAX_CHAIN_DEPTH
    assert len(fake.cname_queries) == MAX_CHAIN_DEPTH + 1


def test_cycle_terminates():
    fake = FakeDNS(cnames={'a.cycle.com': 'b.cycle.com', 'b.cycle.com': 'a.cycle.com'})
    resolver = CNAMEResolver(resolver=fake)
    with pytest.raises(ChainTooLongError):
        resolver.resolve_final_alias('a.cycle.com')


def test_custom_depth():
    resolver = CNAMEResolver(resolver=chain(3), max_depth=2)
    with pytest.raises(ChainTooLongError):
        resolver.resolve_final_alias('h0.chain.com')


def test_timeout_is_lookup_error():
    class TimingOut:
        def resolve(self, qname, rdtype):
            raise dns.exception.Timeout()

    resolver = CNAMEResolver(resolver=TimingOut())
    with pytest.raises(CNAMELookupError):
        resolver.resolve_final_alias('slow.example.com')
