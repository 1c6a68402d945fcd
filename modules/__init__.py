"""
Modules package for the Dark Web Leak Monitor
"""

from .models import Finding, FindingType, ScanCycleResult, ProbeResult
from .pattern_matcher import PatternMatcher, get_pattern_matcher, scan_for_domains, detect_credentials
from .source_registry import Source, SourceCategory, SourceRegistry, get_source_registry
from .alerts import AlertSink, get_alert_sink
from .notifier import DiscordNotifier
from .monitor import DarkWebMonitor, MonitorConfig

__all__ = [
    'Finding', 'FindingType', 'ScanCycleResult', 'ProbeResult',
    'PatternMatcher', 'get_pattern_matcher', 'scan_for_domains', 'detect_credentials',
    'Source', 'SourceCategory', 'SourceRegistry', 'get_source_registry',
    'AlertSink', 'get_alert_sink',
    'DiscordNotifier',
    'DarkWebMonitor', 'MonitorConfig'
]
