"""
Shared fixtures for monitor tests
"""

import pytest

from modules.alerts import AlertSink
from modules.monitor import DarkWebMonitor, MonitorConfig
from modules.pattern_matcher import PatternMatcher
from modules.source_registry import SourceCategory, SourceRegistry
from utils.errors import FetchError


class FakeFetcher:
    """Fetcher double: maps URL -> body, or an exception to raise"""

    def __init__(self, responses=None, default=""):
        self.responses = dict(responses or {})
        self.default = default
        self.calls = []

    async def fetch(self, url, timeout=None, headers=None):
        self.calls.append(url)
        response = self.responses.get(url, self.default)
        if isinstance(response, BaseException):
            raise response
        return response

    async def close(self):
        pass


class RecordingSink(AlertSink):
    """Alert sink that remembers what it was asked to render"""

    def __init__(self):
        super().__init__()
        self.alerted = []
        self.summaries = []

    def alert(self, findings):
        self.alerted.extend(findings)

    def print_summary(self, findings):
        self.summaries.append(list(findings))


BREACH_A = "https://breach-a.test/search?q={domain}"
BREACH_B = "https://breach-b.test/view/{domain}"
LEAK = "https://paste.test/"
DIRECTORY = "https://onions.test/"


@pytest.fixture
def registry():
    return SourceRegistry({
        SourceCategory.BREACH_DB: [
            {"name": "breach-a", "url": BREACH_A},
            {"name": "breach-b", "url": BREACH_B},
        ],
        SourceCategory.LEAK_SITE: [
            {"name": "paste", "url": LEAK},
        ],
        SourceCategory.LINK_DIRECTORY: [
            {"name": "onions", "url": DIRECTORY},
        ],
    })


@pytest.fixture
def fetch_error():
    def _make(url="https://down.test/"):
        return FetchError(url, "Connection refused")
    return _make


@pytest.fixture
def make_monitor(registry):
    """Build a monitor wired to fakes; returns (monitor, fetcher, sink)"""

    def _make(responses=None, domains=("example.com",), default="", **config):
        fetcher = FakeFetcher(responses, default=default)
        sink = RecordingSink()
        monitor = DarkWebMonitor(
            domains,
            MonitorConfig(**config),
            fetcher=fetcher,
            matcher=PatternMatcher(),
            registry=registry,
            alert_sink=sink,
        )
        return monitor, fetcher, sink

    return _make
