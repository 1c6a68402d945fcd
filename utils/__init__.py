"""
Utilities package for the Dark Web Leak Monitor
"""

from .logger import setup_logger, get_logger, log_probe_start, log_probe_complete, log_error
from .errors import MonitorError, ConfigurationError, FetchError
from .fetcher import ContentFetcher, get_fetcher
from .scheduler import PeriodicTask
from .helpers import (
    normalize_domain, is_valid_domain, validate_domains, split_domain_args,
    deduplicate_list, truncate_text, get_timestamp
)

__all__ = [
    'setup_logger', 'get_logger', 'log_probe_start', 'log_probe_complete', 'log_error',
    'MonitorError', 'ConfigurationError', 'FetchError',
    'ContentFetcher', 'get_fetcher', 'PeriodicTask',
    'normalize_domain', 'is_valid_domain', 'validate_domains', 'split_domain_args',
    'deduplicate_list', 'truncate_text', 'get_timestamp'
]
