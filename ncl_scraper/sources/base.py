"""Abstract base class for vendor sites scraped for PDF documents."""

import logging
import os
from abc import ABC, abstractmethod
from typing import List

import httpx

from ..config import AppConfig, SourceConfig
from ..downloader import Downloader
from ..extractor import extract_pdf_urls
from ..models import RunStats
from ..urls import normalize_candidates

logger = logging.getLogger("ncl_scraper")


class BaseSource(ABC):
    name: str = ""

    def __init__(self, config: AppConfig, downloader: Downloader):
        self.config = config
        self.downloader = downloader
        self.source_config: SourceConfig = config.sources.get(
            self.name, SourceConfig()
        )
        self.stats = RunStats()

    @abstractmethod
    def seed_urls(self) -> List[str]:
        """Pages to scan for PDF links, in fetch order."""
        ...

    @property
    def base_url(self) -> str:
        return self.source_config.base_url

    def fetch_pages(self) -> List[str]:
        """Fetch every seed page in order. Failed pages are logged and left out."""
        working_file = self.config.working_file
        if working_file and os.path.exists(working_file):
            try:
                os.remove(working_file)
            except OSError as e:
                logger.error(f"[{self.name}] Cannot remove working file {working_file}: {e}")

        bodies = []
        for url in self.seed_urls():
            logger.info(f"[{self.name}] Scraping {url}")
            try:
                body = self.downloader.fetch_text(url)
            except httpx.HTTPError as e:
                self.stats.pages_failed += 1
                logger.error(f"[{self.name}] Failed to scrape {url}: {e}")
                continue

            self.stats.pages_fetched += 1
            bodies.append(body)
            if working_file:
                self._append_working_file(working_file, body)

        return bodies

    def discover(self) -> List[str]:
        """Fetch pages and return the deduplicated, absolute PDF URLs found in them."""
        blob = "".join(body + "\n" for body in self.fetch_pages())
        candidates = extract_pdf_urls(blob)
        urls, invalid = normalize_candidates(candidates, self.base_url)

        self.stats.discovered += len(urls)
        self.stats.invalid += invalid
        logger.info(
            f"[{self.name}] Found {len(candidates)} PDF links, {len(urls)} unique"
            + (f", {invalid} malformed" if invalid else "")
        )
        return urls

    def run(self) -> RunStats:
        """Discover documents and download each one into the output directory."""
        output_dir = self.config.output_dir
        self._ensure_output_dir(output_dir)

        logger.info(f"[{self.name}] Starting discovery...")
        for url in self.discover():
            artifact = self.downloader.download_pdf(url, output_dir)
            self.stats.record(artifact)

        logger.info(
            f"[{self.name}] Done: {self.stats.discovered} discovered, "
            f"{self.stats.downloaded} downloaded, {self.stats.skipped} skipped, "
            f"{self.stats.rejected} rejected, {self.stats.failed} failed"
        )
        return self.stats

    def _ensure_output_dir(self, output_dir: str):
        if os.path.isdir(output_dir):
            return
        try:
            os.makedirs(output_dir, exist_ok=True)
        except OSError as e:
            # Every download will then fail and be logged on its own
            logger.error(f"[{self.name}] Cannot create output directory {output_dir}: {e}")

    def _append_working_file(self, path: str, body: str):
        try:
            with open(path, "a", encoding="utf-8") as f:
                f.write(body + "\n")
        except OSError as e:
            logger.error(f"[{self.name}] Cannot append to working file {path}: {e}")
