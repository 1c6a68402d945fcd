"""
Static registry of the public sources probed on every cycle
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple
from urllib.parse import quote

from config.config import BREACH_SOURCES, LEAK_SITES, LINK_DIRECTORIES

DOMAIN_PLACEHOLDER = "{domain}"


class SourceCategory:
    BREACH_DB = "breach-db"
    LEAK_SITE = "leak-site"
    LINK_DIRECTORY = "link-directory"

    # Probe order
    ALL = (BREACH_DB, LEAK_SITE, LINK_DIRECTORY)


@dataclass(frozen=True)
class Source:
    name: str
    url_template: str
    category: str

    @property
    def is_templated(self) -> bool:
        return DOMAIN_PLACEHOLDER in self.url_template

    def build_url(self, domain: str = "") -> str:
        """Substitute the URL-quoted domain; fixed URLs come back unchanged"""
        if not self.is_templated:
            return self.url_template
        return self.url_template.replace(DOMAIN_PLACEHOLDER, quote(domain, safe=""))


class SourceRegistry:
    """
    Source groups keyed by category. Holds no network logic.
    """

    def __init__(self, tables: Optional[Dict[str, Sequence[Dict[str, str]]]] = None):
        if tables is None:
            tables = {
                SourceCategory.BREACH_DB: BREACH_SOURCES,
                SourceCategory.LEAK_SITE: LEAK_SITES,
                SourceCategory.LINK_DIRECTORY: LINK_DIRECTORIES,
            }

        self._groups: Dict[str, Tuple[Source, ...]] = {}
        for category, entries in tables.items():
            if category not in SourceCategory.ALL:
                raise ValueError(f"Unknown source category: {category}")
            self._groups[category] = tuple(
                Source(name=entry["name"], url_template=entry["url"], category=category)
                for entry in entries
            )

    def get_group(self, category: str) -> Tuple[Source, ...]:
        """Sources of one category; empty when the category is not configured"""
        if category not in SourceCategory.ALL:
            raise ValueError(f"Unknown source category: {category}")
        return self._groups.get(category, ())

    def groups(self) -> List[str]:
        """Configured categories in probe order"""
        return [category for category in SourceCategory.ALL if category in self._groups]

    def all_sources(self) -> List[Source]:
        return [source for category in self.groups() for source in self._groups[category]]

    def __len__(self) -> int:
        return sum(len(sources) for sources in self._groups.values())


# Singleton instance
_source_registry = None


def get_source_registry() -> SourceRegistry:
    """Get the source registry instance"""
    global _source_registry
    if _source_registry is None:
        _source_registry = SourceRegistry()
    return _source_registry
