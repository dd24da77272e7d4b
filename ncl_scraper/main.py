"""CLI entry point and orchestrator."""

import argparse
import os
from typing import Dict

from dotenv import load_dotenv

from .config import AppConfig, load_config
from .downloader import Downloader
from .logger import setup_logger
from .models import RunStats
from .sources import ALL_SOURCES


def run_scraper(config: AppConfig, source_name: str = None) -> Dict[str, RunStats]:
    """Run discovery + download for sources."""
    results = {}

    with Downloader(config) as downloader:
        if source_name:
            sources_to_run = {source_name: ALL_SOURCES[source_name]}
        else:
            sources_to_run = ALL_SOURCES

        for name, source_cls in sources_to_run.items():
            src_config = config.sources.get(name)
            if src_config and not src_config.enabled:
                print(f"[{name}] Disabled in config, skipping.")
                continue

            print(f"\n{'='*60}")
            print(f"  Source: {name}")
            if src_config and src_config.description:
                print(f"  {src_config.description}")
            print(f"{'='*60}")

            source = source_cls(config, downloader)
            results[name] = source.run()

    return results


def show_stats(results: Dict[str, RunStats]):
    """Display per-source page and download counts."""
    print("\n" + "=" * 78)
    print("  RUN SUMMARY")
    print("=" * 78)
    print(f"{'Source':<14} {'Pages':>6} {'Found':>6} {'Invalid':>8} {'New':>6} "
          f"{'Skipped':>8} {'Rejected':>9} {'Failed':>7} {'Size':>10}")
    print("-" * 78)

    for name, s in results.items():
        pages = f"{s.pages_fetched}/{s.pages_fetched + s.pages_failed}"
        print(f"{name:<14} {pages:>6} {s.discovered:>6} {s.invalid:>8} {s.downloaded:>6} "
              f"{s.skipped:>8} {s.rejected:>9} {s.failed:>7} {_format_bytes(s.total_bytes):>10}")

    print()


def _format_bytes(n: int) -> str:
    if n < 1024:
        return f"{n} B"
    elif n < 1024 ** 2:
        return f"{n / 1024:.1f} KB"
    elif n < 1024 ** 3:
        return f"{n / 1024 ** 2:.1f} MB"
    else:
        return f"{n / 1024 ** 3:.2f} GB"


def main(argv=None):
    load_dotenv()

    parser = argparse.ArgumentParser(description="NCL Online SDS/PDF Scraper")
    parser.add_argument("--source", type=str, default=None,
                        choices=list(ALL_SOURCES.keys()),
                        help="Run a single source instead of all")
    parser.add_argument("--config", type=str,
                        default=os.environ.get("NCL_SCRAPER_CONFIG", "config.yaml"),
                        help="Path to config file")
    parser.add_argument("--output-dir", type=str, default=None,
                        help="Directory to store PDFs (overrides config)")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    if args.output_dir:
        config.output_dir = args.output_dir
    setup_logger(config.log_dir, config.log_level)

    print("NCL Online SDS Scraper")
    print(f"Output directory: {config.output_dir}")

    results = run_scraper(config, args.source)
    show_stats(results)


if __name__ == "__main__":
    main()
