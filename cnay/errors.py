"""
Exceptions raised by cnay
"""


class CnayError(Exception):
    """Base class for all cnay errors"""


class InputUnavailableError(CnayError):
    """No hostname source could be opened (no file and no piped stdin)"""


class ResolutionError(CnayError):
    """A lookup for a single hostname failed. Never fatal to the run."""

    def __init__(self, hostname: str, message: str):
        super().__init__(f"{hostname}: {message}")
        self.hostname = hostname
        self.message = message


class AddressLookupError(ResolutionError):
    """Forward address lookup failed"""


class CNAMELookupError(ResolutionError):
    """CNAME lookup failed somewhere along the chain"""


class ChainTooLongError(CNAMELookupError):
    """CNAME chain did not terminate within the depth bound"""

    def __init__(self, hostname: str, max_depth: int):
        super().__init__(
            hostname, f"maximum CNAME chain depth ({max_depth}) exceeded"
        )
        self.max_depth = max_depth
