"""
Console alert and summary rendering
"""

from typing import Iterable, List, Optional

from modules.models import Finding
from utils.printer import Printer, get_printer


class AlertSink:
    """
    Render findings as they arrive and the end-of-run summary.

    Keeps no state: the session's findings list belongs to the monitor.
    """

    def __init__(self, printer: Optional[Printer] = None):
        self.printer = printer or get_printer()

    def alert(self, findings: Iterable[Finding]) -> None:
        for finding in findings:
            self.printer.alert_header("ALERT: Potential Credential Leak Detected!")
            self.printer.separator(50)
            self.printer.field("Source", finding.source)
            self.printer.field("Type", finding.type or "unknown")
            self.printer.field("URL", finding.url or "N/A")
            self.printer.field("Matched Domains", ", ".join(finding.matched_domains), Printer.YELLOW)
            if finding.credentials:
                self.printer.field("Credential Types", ", ".join(finding.credentials), Printer.RED)
            if finding.snippet:
                self.printer.line()
                self.printer.field("Snippet", f"{finding.snippet}...", Printer.DIM)
            self.printer.separator(50)

    def print_summary(self, findings: List[Finding]) -> None:
        """Print totals and one line per finding across the whole session"""
        self.printer.phase("📊 Summary")
        self.printer.separator(30)
        self.printer.count("Total findings", len(findings), Printer.MAGENTA if findings else Printer.GREEN)

        if findings:
            self.printer.line("\nDetails:")
            for finding in findings:
                self.printer.line(
                    f"  - [{finding.timestamp}] {finding.source}: {', '.join(finding.matched_domains)}"
                )


# Singleton instance
_alert_sink = None


def get_alert_sink() -> AlertSink:
    """Get the alert sink instance"""
    global _alert_sink
    if _alert_sink is None:
        _alert_sink = AlertSink()
    return _alert_sink
