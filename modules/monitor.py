"""
Scan orchestrator: drives check cycles over every source group
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from config.config import DEFAULT_INTERVAL_MINUTES, REQUEST_TIMEOUT
from modules.alerts import AlertSink, get_alert_sink
from modules.models import Finding, FindingType, ProbeResult, ScanCycleResult
from modules.notifier import DiscordNotifier
from modules.pattern_matcher import PatternMatcher, get_pattern_matcher
from modules.source_registry import Source, SourceCategory, SourceRegistry, get_source_registry
from utils.errors import ConfigurationError, FetchError
from utils.fetcher import ContentFetcher, get_fetcher
from utils.helpers import deduplicate_list
from utils.logger import get_logger, log_error, log_probe_complete, log_probe_start
from utils.printer import get_printer
from utils.scheduler import PeriodicTask


@dataclass
class MonitorConfig:
    interval: float = DEFAULT_INTERVAL_MINUTES * 60  # seconds
    verbose: bool = False
    once: bool = False
    timeout: float = REQUEST_TIMEOUT

    @classmethod
    def from_minutes(
        cls,
        minutes: float = DEFAULT_INTERVAL_MINUTES,
        verbose: bool = False,
        once: bool = False,
        timeout: float = REQUEST_TIMEOUT
    ) -> "MonitorConfig":
        if minutes is None or minutes <= 0:
            raise ConfigurationError(f"Interval must be a positive number of minutes, got {minutes}")
        if timeout is None or timeout <= 0:
            raise ConfigurationError(f"Timeout must be a positive number of seconds, got {timeout}")
        return cls(interval=minutes * 60, verbose=verbose, once=once, timeout=timeout)


class DarkWebMonitor:
    """
    Monitoring session for a fixed set of domains.

    Lifecycle: Idle -> Running(cycle) -> Idle (once mode) or Scheduled.
    Each probe and each (source, domain) unit sits in its own failure
    boundary, so one source's outage never blocks the others.
    """

    def __init__(
        self,
        domains: Iterable[str],
        config: Optional[MonitorConfig] = None,
        fetcher: Optional[ContentFetcher] = None,
        matcher: Optional[PatternMatcher] = None,
        registry: Optional[SourceRegistry] = None,
        alert_sink: Optional[AlertSink] = None,
        notifier: Optional[DiscordNotifier] = None
    ):
        self.domains = tuple(deduplicate_list(list(domains)))
        if not self.domains:
            raise ConfigurationError("No valid domains to monitor")

        self.config = config or MonitorConfig()
        self.logger = get_logger()
        self.printer = get_printer()
        self.fetcher = fetcher or get_fetcher()
        self.matcher = matcher or get_pattern_matcher()
        self.registry = registry or get_source_registry()
        self.alert_sink = alert_sink or get_alert_sink()
        self.notifier = notifier

        self.findings: List[Finding] = []
        self.last_check: Optional[datetime] = None
        self.is_running = False
        self.cycles_completed = 0
        self.scheduler: Optional[PeriodicTask] = None

    async def start(self) -> None:
        """Run one cycle, then either finish (once mode) or arm the timer"""
        if self.is_running:
            self.logger.warning("Monitor is already running")
            return

        self.is_running = True
        self.printer.info("🚀 Starting dark web monitoring...")

        await self.check()

        if self.config.once:
            self.printer.success("Single scan completed")
            self.print_summary()
            if self.notifier and self.notifier.enabled:
                await self.notifier.send_summary_alert(self.findings, self.domains)
            self.is_running = False
            return

        # stop() may have been called while the first cycle ran
        if not self.is_running:
            return

        minutes = self.config.interval / 60
        self.printer.info(f"⏳ Continuous monitoring active. Checking every {minutes:g} minutes...")
        self.printer.info("Press Ctrl+C to stop.")

        self.scheduler = PeriodicTask(self.check, self.config.interval, name="dark-web-check")
        self.scheduler.arm()

    def stop(self) -> None:
        """Cancel any pending cycle. Safe to call repeatedly."""
        if self.scheduler is not None:
            self.scheduler.cancel()
        self.is_running = False

    async def wait(self) -> None:
        """Block until the schedule ends (immediately in once mode)"""
        if self.scheduler is not None:
            await self.scheduler.wait()

    async def check(self) -> List[Finding]:
        """
        Run one full cycle over breach databases, leak sites and link directories

        Returns:
            Findings discovered in this cycle
        """
        self.last_check = datetime.now(timezone.utc)
        self.logger.info(f"[{self.last_check.isoformat()}] Checking dark web sources...")

        total_scanned = 0
        threats_found = 0
        cycle_findings: List[Finding] = []

        probes: List[tuple] = [
            ("breach databases", self.check_breach_databases),
            ("leak sites", self.check_leak_sites),
            ("dark web link directories", self.check_dark_web_links),
        ]

        for label, probe in probes:
            try:
                if self.config.verbose:
                    self.logger.info(f"📂 Checking {label}...")
                probe_result = await probe()
                total_scanned += probe_result.attempted

                for result in probe_result.results:
                    if result.findings:
                        threats_found += len(result.findings)
                        self.findings.extend(result.findings)
                        cycle_findings.extend(result.findings)
                        await self._dispatch(result.findings)
            except Exception as e:
                log_error(self.logger, label, str(e))

        self.cycles_completed += 1
        self.logger.info(f"✅ Scanned {total_scanned} sources, found {threats_found} potential leak(s)")
        return cycle_findings

    async def check_breach_databases(self) -> ProbeResult:
        """Query every breach source once per monitored domain"""
        sources = self.registry.get_group(SourceCategory.BREACH_DB)
        log_probe_start(self.logger, "breach database check", len(sources))
        probe = ProbeResult()

        for source in sources:
            for domain in self.domains:
                probe.attempted += 1
                url = source.build_url(domain)
                content = await self._fetch(source, url)
                if content is None:
                    continue

                findings = self.matcher.analyze_content(
                    content, [domain], source.name, url=url, finding_type=FindingType.BREACH_CHECK
                )
                if findings:
                    probe.results.append(ScanCycleResult(source=source.name, domain=domain, findings=findings))

        log_probe_complete(self.logger, "breach database check", probe.attempted, len(probe.findings))
        return probe

    async def check_leak_sites(self) -> ProbeResult:
        """Fetch each leak-site landing page once and match all domains against it"""
        sources = self.registry.get_group(SourceCategory.LEAK_SITE)
        log_probe_start(self.logger, "leak site check", len(sources))
        probe = ProbeResult()

        for source in sources:
            probe.attempted += 1
            url = source.build_url()
            content = await self._fetch(source, url)
            if content is None:
                continue

            findings = self.matcher.analyze_content(
                content, self.domains, source.name, url=url, finding_type=FindingType.LEAK_SITE
            )
            if findings:
                probe.results.append(ScanCycleResult(source=source.name, domain="multiple", findings=findings))

        log_probe_complete(self.logger, "leak site check", probe.attempted, len(probe.findings))
        return probe

    async def check_dark_web_links(self) -> ProbeResult:
        """
        Look for plain domain mentions in onion-link directories.

        A mention alone is reported; credential patterns are not checked here.
        """
        sources = self.registry.get_group(SourceCategory.LINK_DIRECTORY)
        log_probe_start(self.logger, "link directory check", len(sources))
        probe = ProbeResult()

        for source in sources:
            probe.attempted += 1
            url = source.build_url()
            content = await self._fetch(source, url)
            if content is None:
                continue

            lowered = content.lower()
            for domain in self.domains:
                if domain.lower() not in lowered:
                    continue
                finding = Finding.create(
                    source=source.name,
                    finding_type=FindingType.ONION_DIRECTORY,
                    url=url,
                    matched_domains=[domain],
                    credentials=[],
                    snippet=f"Domain {domain} found in {source.name}"
                )
                probe.results.append(ScanCycleResult(source=source.name, domain=domain, findings=[finding]))

        log_probe_complete(self.logger, "link directory check", probe.attempted, len(probe.findings))
        return probe

    async def _fetch(self, source: Source, url: str) -> Optional[str]:
        """Fetch one unit; transport errors count as no content"""
        try:
            return await self.fetcher.fetch(url, timeout=self.config.timeout)
        except FetchError as e:
            if self.config.verbose:
                self.logger.warning(f"{source.name} error: {e}")
            else:
                self.logger.debug(f"{source.name} error: {e}")
            return None

    async def _dispatch(self, findings: List[Finding]) -> None:
        self.alert_sink.alert(findings)
        if self.notifier and self.notifier.enabled:
            await self.notifier.send_finding_alerts(findings)

    def print_summary(self) -> None:
        self.alert_sink.print_summary(self.findings)
