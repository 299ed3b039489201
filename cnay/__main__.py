"""
cnay - CNAME-aware hostname to IPv4 resolver

Entry point for running as a module:
    python -m cnay -l hostnames.txt
"""

from .cli import main

if __name__ == '__main__':
    main()
