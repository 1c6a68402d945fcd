"""
Tests for Discord webhook notifications
"""

import asyncio
from unittest.mock import AsyncMock

from config.config import FINDING_COLORS
from modules.models import Finding, FindingType
from modules.notifier import DiscordNotifier
from utils.errors import FetchError


def _finding(snippet="bob@example.com:pw"):
    return Finding(
        timestamp="2026-01-01T00:00:00+00:00",
        source="leakpeek",
        type=FindingType.BREACH_CHECK,
        url="https://leakpeek.com/search?search=example.com",
        matched_domains=("example.com",),
        credentials=("email", "credential_pair"),
        snippet=snippet
    )


def _notifier(status=204, side_effect=None, url="https://discord.test/hook"):
    fetcher = AsyncMock()
    fetcher.post_json.return_value = status
    fetcher.post_json.side_effect = side_effect
    return DiscordNotifier(url, fetcher=fetcher), fetcher


def test_disabled_without_webhook():
    notifier, fetcher = _notifier(url="")
    assert notifier.enabled is False
    assert asyncio.run(notifier.send_finding_alert(_finding())) is False
    assert asyncio.run(notifier.send_summary_alert([_finding()])) is False
    fetcher.post_json.assert_not_called()


def test_embed_fields():
    notifier, _ = _notifier()
    embed = notifier._create_discord_embed(_finding())

    assert embed["title"] == "🚨 Potential Credential Leak - leakpeek"
    assert embed["color"] == FINDING_COLORS[FindingType.BREACH_CHECK]
    values = {field["name"]: field["value"] for field in embed["fields"]}
    assert values["🌐 Domains"] == "example.com"
    assert values["🔑 Credential Types"] == "email, credential_pair"
    assert values["📋 Snippet"] == "```bob@example.com:pw```"


def test_embed_values_respect_discord_limit():
    notifier, _ = _notifier()
    embed = notifier._create_discord_embed(_finding(snippet="x" * 5000))
    assert all(len(field["value"]) <= 1024 for field in embed["fields"])


def test_send_finding_alert_posts_embed():
    notifier, fetcher = _notifier()
    assert asyncio.run(notifier.send_finding_alert(_finding())) is True

    url, payload = fetcher.post_json.await_args.args
    assert url == "https://discord.test/hook"
    assert payload["username"] == "Dark Web Monitor"
    assert len(payload["embeds"]) == 1


def test_rejected_or_failed_posts_return_false():
    notifier, _ = _notifier(status=400)
    assert asyncio.run(notifier.send_finding_alert(_finding())) is False

    notifier, _ = _notifier(side_effect=FetchError("https://discord.test/hook", "timeout"))
    assert asyncio.run(notifier.send_finding_alert(_finding())) is False


def test_send_finding_alerts_counts_deliveries():
    notifier, fetcher = _notifier()
    assert asyncio.run(notifier.send_finding_alerts([_finding(), _finding()])) == 2
    assert fetcher.post_json.await_count == 2


def test_summary_breaks_down_by_source():
    notifier, fetcher = _notifier()
    assert asyncio.run(notifier.send_summary_alert([_finding(), _finding()], ["example.com"])) is True

    embed = fetcher.post_json.await_args.args[1]["embeds"][0]
    assert embed["description"] == "**Total findings:** 2"
    values = {field["name"]: field["value"] for field in embed["fields"]}
    assert values["Domains"] == "example.com"
    assert values["By source"] == "**leakpeek:** 2"
