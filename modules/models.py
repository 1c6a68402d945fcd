"""
Data models shared by the matcher, the monitor and the alert sinks
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Sequence, Tuple

from utils.helpers import get_timestamp


class FindingType:
    BREACH_CHECK = "breach_check"
    LEAK_SITE = "leak_site"
    ONION_DIRECTORY = "onion_directory"


@dataclass(frozen=True)
class Finding:
    timestamp: str
    source: str
    type: str
    url: str
    matched_domains: Tuple[str, ...]
    credentials: Tuple[str, ...] = ()
    snippet: str = ""

    def __post_init__(self):
        if not self.matched_domains:
            raise ValueError("A finding needs at least one matched domain")

    @classmethod
    def create(
        cls,
        source: str,
        finding_type: str,
        url: str,
        matched_domains: Sequence[str],
        credentials: Sequence[str] = (),
        snippet: str = ""
    ) -> "Finding":
        """Build a finding stamped with the current UTC time"""
        return cls(
            timestamp=get_timestamp(),
            source=source,
            type=finding_type,
            url=url,
            matched_domains=tuple(matched_domains),
            credentials=tuple(credentials),
            snippet=snippet
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["matched_domains"] = list(self.matched_domains)
        data["credentials"] = list(self.credentials)
        return data


@dataclass
class ScanCycleResult:
    """Findings from one source, for one domain or for ``multiple``"""
    source: str
    domain: str
    findings: List[Finding]


@dataclass
class ProbeResult:
    """Outcome of one probe over a source group"""
    attempted: int = 0
    results: List[ScanCycleResult] = field(default_factory=list)

    @property
    def findings(self) -> List[Finding]:
        return [finding for result in self.results for finding in result.findings]
