"""
Registrable domain comparison using the public suffix list
"""

from typing import Optional

import tldextract


# Bundled snapshot only: no network fetch, no disk cache.
_extract = tldextract.TLDExtract(
    cache_dir=None,
    suffix_list_urls=(),
    include_psl_private_domains=True,
)


def _clean(name: str) -> Optional[str]:
    """Strip the root dot and lowercase; None for names that cannot be a host"""
    if not name:
        return None

    name = name.strip().rstrip('.').lower()
    if not name or any(ch.isspace() for ch in name):
        return None

    if any(label == '' for label in name.split('.')):
        return None

    return name


def registrable_domain(name: str) -> Optional[str]:
    """
    Get the registrable domain (public suffix plus one label).

    Examples:
        www.example.com  -> example.com
        a.b.example.co.uk -> example.co.uk
        co.uk            -> None (bare public suffix)
        www.internal.corp -> internal.corp (unlisted suffix)
        localhost        -> None

    Args:
        name: Hostname, with or without a trailing dot

    Returns:
        Registrable domain in lowercase, or None if it cannot be determined
    """
    cleaned = _clean(name)
    if cleaned is None:
        return None

    extracted = _extract(cleaned)
    if extracted.domain and extracted.suffix:
        return f"{extracted.domain}.{extracted.suffix}"

    # Suffix not on the list: the last label is the suffix
    labels = cleaned.split('.')
    if not extracted.suffix and len(labels) >= 2:
        return f"{labels[-2]}.{labels[-1]}"

    return None


def same_registrable_domain(name_a: str, name_b: str) -> bool:
    """Check whether two hostnames belong to the same registrable domain"""
    domain_a = registrable_domain(name_a)
    if domain_a is None:
        return False

    domain_b = registrable_domain(name_b)
    if domain_b is None:
        return False

    return domain_a == domain_b
