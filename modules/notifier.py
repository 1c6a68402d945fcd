"""
Discord notification module for sending leak alerts
"""

from typing import Any, Dict, Iterable, List, Optional

from config.config import DISCORD_WEBHOOK_URL, FINDING_COLORS
from modules.models import Finding
from utils.errors import FetchError
from utils.fetcher import ContentFetcher, get_fetcher
from utils.logger import get_logger

# Discord field value limit
FIELD_LIMIT = 1024


def _clip(value: str, limit: int = FIELD_LIMIT) -> str:
    if len(value) > limit:
        return value[:limit - 3] + "..."
    return value


class DiscordNotifier:
    """
    Forward findings to a Discord webhook. Disabled when no URL is set.
    """

    def __init__(self, webhook_url: Optional[str] = None, fetcher: Optional[ContentFetcher] = None):
        self.logger = get_logger()
        self.webhook_url = DISCORD_WEBHOOK_URL if webhook_url is None else webhook_url
        self.fetcher = fetcher or get_fetcher()

    @property
    def enabled(self) -> bool:
        return bool(self.webhook_url)

    async def send_finding_alert(self, finding: Finding) -> bool:
        """
        Send one finding as a Discord embed

        Args:
            finding: Finding to report

        Returns:
            True if Discord accepted the message
        """
        if not self.enabled:
            return False
        return await self._post({"embeds": [self._create_discord_embed(finding)]}, finding.source)

    async def send_finding_alerts(self, findings: Iterable[Finding]) -> int:
        """Send every finding; returns the number delivered"""
        delivered = 0
        for finding in findings:
            if await self.send_finding_alert(finding):
                delivered += 1
        return delivered

    async def send_summary_alert(self, findings: List[Finding], domains: Iterable[str] = ()) -> bool:
        """Send the end-of-run totals"""
        if not self.enabled:
            return False

        by_source: Dict[str, int] = {}
        for finding in findings:
            by_source[finding.source] = by_source.get(finding.source, 0) + 1

        breakdown = "\n".join(f"**{source}:** {count}" for source, count in by_source.items())
        embed = {
            "title": "📊 Dark Web Monitor Summary",
            "description": f"**Total findings:** {len(findings)}",
            "color": FINDING_COLORS["summary"],
            "fields": []
        }
        monitored = ", ".join(domains)
        if monitored:
            embed["fields"].append({"name": "Domains", "value": _clip(monitored), "inline": False})
        if breakdown:
            embed["fields"].append({"name": "By source", "value": _clip(breakdown), "inline": False})

        return await self._post({"embeds": [embed]}, "summary")

    def _create_discord_embed(self, finding: Finding) -> Dict[str, Any]:
        """
        Create Discord embed for the finding

        Args:
            finding: Finding to render

        Returns:
            Discord embed dictionary
        """
        fields = [
            {"name": "🌐 Domains", "value": _clip(", ".join(finding.matched_domains)), "inline": True},
            {"name": "📂 Type", "value": finding.type, "inline": True},
        ]

        if finding.credentials:
            fields.append({
                "name": "🔑 Credential Types",
                "value": _clip(", ".join(finding.credentials)),
                "inline": False
            })

        if finding.url:
            fields.append({"name": "🔗 URL", "value": _clip(finding.url), "inline": False})

        if finding.snippet:
            fields.append({
                "name": "📋 Snippet",
                "value": f"```{_clip(finding.snippet, FIELD_LIMIT - 6)}```",
                "inline": False
            })

        return {
            "title": f"🚨 Potential Credential Leak - {finding.source}",
            "color": FINDING_COLORS.get(finding.type, 0x808080),
            "fields": fields,
            "timestamp": finding.timestamp,
            "footer": {"text": "darkweb-monitor"}
        }

    async def _post(self, payload: Dict[str, Any], label: str) -> bool:
        payload.setdefault("username", "Dark Web Monitor")
        try:
            status = await self.fetcher.post_json(self.webhook_url, payload)
        except FetchError as e:
            self.logger.warning(f"Failed to send Discord alert for {label}: {e}")
            return False

        if status in (200, 204):
            self.logger.debug(f"Discord alert sent for {label}")
            return True

        self.logger.warning(f"Discord webhook rejected alert for {label}: HTTP {status}")
        return False
