"""
Pattern matcher for domain mentions and leaked-credential material
"""

import re
from typing import Dict, Iterable, List, Optional, Pattern, Sequence

from config.config import CREDENTIAL_PATTERNS, MAX_SCAN_CHARS, SNIPPET_LENGTH
from modules.models import Finding, FindingType
from utils.helpers import deduplicate_list, truncate_text
from utils.logger import get_logger


class PatternMatcher:
    """
    Match monitored domains and credential-like patterns in fetched text.

    Both matching methods are pure: they never touch the network, never
    mutate their inputs and return the same answer for the same text.
    """

    def __init__(
        self,
        patterns: Optional[Dict[str, List[str]]] = None,
        max_chars: int = MAX_SCAN_CHARS,
        snippet_length: int = SNIPPET_LENGTH
    ):
        self.logger = get_logger()
        self.patterns = patterns if patterns is not None else CREDENTIAL_PATTERNS
        self.max_chars = max_chars
        self.snippet_length = snippet_length

        self.compiled: Dict[str, List[Pattern]] = {
            label: [re.compile(pattern, re.MULTILINE) for pattern in regexes]
            for label, regexes in self.patterns.items()
        }

    @property
    def categories(self) -> List[str]:
        """Credential category labels in detection order"""
        return list(self.compiled)

    def _prepare(self, text) -> str:
        if not isinstance(text, str) or not text:
            return ""
        if len(text) > self.max_chars:
            self.logger.debug(f"Truncating {len(text)} chars to {self.max_chars} before matching")
            return text[:self.max_chars]
        return text

    def scan_for_domains(self, text: str, domains: Iterable[str]) -> List[str]:
        """
        Find which domains appear in the text

        Args:
            text: Raw page content
            domains: Monitored domains

        Returns:
            Domains present in the text (case-insensitive), in input order
        """
        content = self._prepare(text).lower()
        if not content:
            return []

        matches = []
        for domain in deduplicate_list(list(domains)):
            if domain and domain.lower() in content:
                matches.append(domain)

        return matches

    def detect_credentials(self, text: str) -> List[str]:
        """
        Detect credential-like patterns in the text

        Args:
            text: Raw page content

        Returns:
            Distinct category labels found, in category order
        """
        content = self._prepare(text)
        if not content:
            return []

        found = []
        for label, regexes in self.compiled.items():
            if any(regex.search(content) for regex in regexes):
                found.append(label)

        return found

    def analyze_content(
        self,
        content: str,
        domains: Sequence[str],
        source: str,
        url: str = "",
        finding_type: str = FindingType.BREACH_CHECK
    ) -> List[Finding]:
        """
        Turn a fetched page into findings.

        A finding needs a domain match and at least one credential pattern;
        a domain mention on its own yields nothing.
        """
        matched_domains = self.scan_for_domains(content, domains)
        if not matched_domains:
            return []

        credentials = self.detect_credentials(content)
        if not credentials:
            return []

        return [Finding.create(
            source=source,
            finding_type=finding_type,
            url=url,
            matched_domains=matched_domains,
            credentials=credentials,
            snippet=truncate_text(content, self.snippet_length)
        )]


# Singleton instance
_pattern_matcher = None


def get_pattern_matcher() -> PatternMatcher:
    """Get the pattern matcher instance"""
    global _pattern_matcher
    if _pattern_matcher is None:
        _pattern_matcher = PatternMatcher()
    return _pattern_matcher


def scan_for_domains(text: str, domains: Iterable[str]) -> List[str]:
    return get_pattern_matcher().scan_for_domains(text, domains)


def detect_credentials(text: str) -> List[str]:
    return get_pattern_matcher().detect_credentials(text)
