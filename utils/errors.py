"""
Exception types for the Dark Web Leak Monitor
"""

from typing import Optional


class MonitorError(Exception):
    """Base class for monitor errors"""


class ConfigurationError(MonitorError):
    """Startup configuration is unusable (no valid domains, bad interval)"""


class FetchError(MonitorError):
    """
    Transport failure for a single request: timeout, DNS, connection,
    non-2xx status or an undecodable body
    """

    def __init__(self, url: str, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status = status

    def __str__(self) -> str:
        return f"{self.args[0]} ({self.url})"
