"""
Output modules for cnay
"""

from .console import ConsoleOutput
from .formatter import format_results

__all__ = ['ConsoleOutput', 'format_results']
