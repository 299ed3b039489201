"""
cnay - CNAME-aware hostname to IPv4 resolver

Resolves a list of hostnames to their IPv4 addresses, skipping hostnames
whose CNAME chain ends in a different registrable domain.
"""

__version__ = "1.0.0"
__author__ = "cnay"
