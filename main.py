#!/usr/bin/env python3
"""
Dark Web Leak Monitor
Periodically probes public breach, leak and onion-directory sources for
mentions of monitored domains and leaked-credential patterns
"""

import asyncio
import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from utils.logger import setup_logger, get_logger
from utils.helpers import split_domain_args, validate_domains, normalize_domain
from utils.errors import ConfigurationError
from utils.fetcher import ContentFetcher
from utils.printer import get_printer
from config.config import (
    DEFAULT_INTERVAL_MINUTES, REQUEST_TIMEOUT, MAX_RETRIES, DOMAINS_ENV_VAR, DISCORD_WEBHOOK_URL
)
from modules.monitor import DarkWebMonitor, MonitorConfig
from modules.notifier import DiscordNotifier


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="darkweb-monitor",
        description="Dark Web Leak Monitor - watch public leak sources for your domains",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  %(prog)s -d example.com --once
  %(prog)s -d example.com,api.example.io -i 15 -v
  {DOMAINS_ENV_VAR}=example.com %(prog)s
        """
    )

    parser.add_argument(
        "-d", "--domains",
        action="append",
        default=[],
        help=f"Comma-separated domains to monitor (repeatable, default: ${DOMAINS_ENV_VAR})"
    )

    parser.add_argument(
        "-o", "--once",
        action="store_true",
        help="Run a single scan and exit"
    )

    parser.add_argument(
        "-i", "--interval",
        type=float,
        default=DEFAULT_INTERVAL_MINUTES,
        help=f"Minutes between scans in continuous mode (default: {DEFAULT_INTERVAL_MINUTES})"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Report every per-source failure"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=REQUEST_TIMEOUT,
        help=f"Per-request timeout in seconds (default: {REQUEST_TIMEOUT})"
    )

    parser.add_argument(
        "--retries",
        type=int,
        default=MAX_RETRIES,
        help=f"Retries per request on timeouts, connection errors and HTTP 429 (default: {MAX_RETRIES})"
    )

    parser.add_argument(
        "--webhook",
        type=str,
        default=DISCORD_WEBHOOK_URL,
        help="Discord webhook URL for alerts (default: $DARKWEB_MONITOR_WEBHOOK)"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)"
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Also write logs to this file"
    )

    return parser


def resolve_domains(cli_values: List[str]) -> List[str]:
    """Domains from the CLI, falling back to the environment"""
    raw = split_domain_args(cli_values)
    if not raw and os.environ.get(DOMAINS_ENV_VAR):
        raw = split_domain_args([os.environ[DOMAINS_ENV_VAR]])
    return raw


async def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    printer = get_printer()
    printer.banner()

    parser = build_parser()
    args = parser.parse_args(argv)

    logger = setup_logger(
        log_level="DEBUG" if args.verbose and args.log_level == "INFO" else args.log_level,
        log_file=Path(args.log_file) if args.log_file else None
    )

    raw_domains = resolve_domains(args.domains)
    domains = validate_domains(raw_domains)

    for raw in raw_domains:
        if normalize_domain(raw) not in domains:
            logger.warning(f"Ignoring invalid domain: {raw}")

    if not domains:
        logger.error("No valid domains provided. Use -d example.com")
        return 1

    try:
        config = MonitorConfig.from_minutes(
            args.interval, verbose=args.verbose, once=args.once, timeout=args.timeout
        )
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    logger.info(f"Monitoring {len(domains)} domain(s): {', '.join(domains)}")

    fetcher = ContentFetcher(timeout=args.timeout, max_retries=max(args.retries, 0))
    notifier = DiscordNotifier(args.webhook or "", fetcher=fetcher)
    monitor = DarkWebMonitor(domains, config, fetcher=fetcher, notifier=notifier)

    try:
        await monitor.start()
        await monitor.wait()
    finally:
        monitor.stop()
        await fetcher.close()

    return 0


def run() -> int:
    """Console script entry point"""
    try:
        return asyncio.run(main())
    except KeyboardInterrupt:
        get_logger().info("Monitoring stopped by user")
        return 0


if __name__ == "__main__":
    sys.exit(run())
