"""
Configuration settings for the Dark Web Leak Monitor
"""

import os

# Scheduling
DEFAULT_INTERVAL_MINUTES = 30

# HTTP settings
REQUEST_TIMEOUT = 10  # seconds, per fetch
MAX_CONCURRENT_REQUESTS = 3
MAX_RETRIES = 0  # one attempt per (source, domain) unit
BACKOFF_FACTOR = 2

# User agents for rotation
USER_AGENTS = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:125.0) Gecko/20100101 Firefox/125.0",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:125.0) Gecko/20100101 Firefox/125.0"
]

# Content analysis limits
SNIPPET_LENGTH = 200
MAX_SCAN_CHARS = 2 * 1024 * 1024  # larger bodies are truncated before matching

# Credential detection patterns, checked in this order.
# Add a new category here and every caller picks it up.
CREDENTIAL_PATTERNS = {
    "email": [
        r"(?<![A-Za-z0-9._%+-])[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"
    ],
    "credential_pair": [
        r"(?<![A-Za-z0-9._%+-])[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}[ \t]*[:;|][ \t]*[^\s:;|<>\"']{4,}"
    ],
    "password": [
        r"(?i)\b(password|passwd|pwd|pass)\s*[:=]\s*['\"]?([^\s'\"<>]{4,})"
    ],
    "md5_hash": [
        r"\b[a-fA-F0-9]{32}\b"
    ],
    "sha1_hash": [
        r"\b[a-fA-F0-9]{40}\b"
    ],
    "sha256_hash": [
        r"\b[a-fA-F0-9]{64}\b"
    ],
    "bcrypt_hash": [
        r"\$2[abxy]?\$\d{2}\$[./A-Za-z0-9]{53}"
    ],
    "base64_token": [
        r"(?<![A-Za-z0-9+/])(?=[A-Za-z0-9+/]*[A-Z])(?=[A-Za-z0-9+/]*[a-z])[A-Za-z0-9+/]{40,}={0,2}(?![A-Za-z0-9+/=])"
    ]
}

# Source tables. "{domain}" is replaced with the URL-quoted monitored domain.
BREACH_SOURCES = [
    {
        "name": "scylla.sh",
        "url": "https://scylla.sh/search?q={domain}"
    },
    {
        "name": "leakpeek",
        "url": "https://leakpeek.com/search?search={domain}"
    },
    {
        "name": "Dehashed Search",
        "url": "https://dehashed.com/search?q={domain}"
    },
    {
        "name": "BugMeNot",
        "url": "https://bugmenot.com/view/{domain}"
    }
]

LEAK_SITES = [
    {
        "name": "PrivateBin",
        "url": "https://privatebin.net/"
    },
    {
        "name": "0bin",
        "url": "https://0bin.net/"
    }
]

LINK_DIRECTORIES = [
    {
        "name": "darkwebnews onion directory",
        "url": "https://www.darkwebnews.com/onions/"
    },
    {
        "name": "darknetstats",
        "url": "https://dnstats.net/"
    }
]

# Environment overrides
DOMAINS_ENV_VAR = "DARKWEB_MONITOR_DOMAINS"
WEBHOOK_ENV_VAR = "DARKWEB_MONITOR_WEBHOOK"
DISCORD_WEBHOOK_URL = os.environ.get(WEBHOOK_ENV_VAR, "")

# Discord embed colors per finding type
FINDING_COLORS = {
    "breach_check": 0xFF0000,     # Red
    "leak_site": 0xFF6600,        # Orange
    "onion_directory": 0xFFFF00,  # Yellow
    "summary": 0x00FFFF           # Cyan
}
