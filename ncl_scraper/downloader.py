"""HTTP download engine: skip-if-present, content-type and empty-body checks, single write."""

import logging
import os
import time
from typing import Optional

import httpx

from .config import AppConfig
from .filenames import url_to_filename
from .models import DOWNLOADED, FAILED, REJECTED, SKIPPED, Artifact

logger = logging.getLogger("ncl_scraper")


class Downloader:
    def __init__(self, config: AppConfig, transport: Optional[httpx.BaseTransport] = None):
        self.config = config
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        if self._client is None or self._client.is_closed:
            headers = {}
            if self.config.download.user_agent:
                headers["User-Agent"] = self.config.download.user_agent
            self._client = httpx.Client(
                timeout=httpx.Timeout(self.config.download.timeout),
                follow_redirects=True,
                headers=headers,
                transport=self._transport,
            )
        return self._client

    def close(self):
        if self._client and not self._client.is_closed:
            self._client.close()

    def __enter__(self) -> "Downloader":
        return self

    def __exit__(self, *exc_info):
        self.close()

    def accepts(self, content_type: str) -> bool:
        ct = content_type.lower()
        return any(accepted.lower() in ct for accepted in self.config.download.accepted_content_types)

    def download_pdf(self, url: str, output_dir: str) -> Artifact:
        """Download one PDF into output_dir unless its target file already exists.

        Never raises for network, validation or filesystem problems; the outcome
        is reported through the returned Artifact's status.
        """
        filename = url_to_filename(url)
        local_path = os.path.join(output_dir, filename)
        artifact = Artifact(url=url, filename=filename, local_path=local_path)

        if os.path.isfile(local_path):
            logger.info(f"File already exists, skipping: {local_path}")
            artifact.status = SKIPPED
            return artifact

        timeout = self.config.download.timeout
        deadline = None if timeout is None else time.monotonic() + timeout
        content = bytearray()

        # The client timeout bounds each connect/read; the deadline bounds the whole exchange
        try:
            with self.client.stream("GET", url) as resp:
                if _expired(deadline):
                    return self._fail(artifact, FAILED, f"Timed out after {timeout}s waiting for {url}")

                if resp.status_code != 200:
                    return self._fail(
                        artifact, FAILED,
                        f"Download failed for {url}: {resp.status_code} {resp.reason_phrase}",
                    )

                ct = resp.headers.get("content-type", "")
                if not self.accepts(ct):
                    expected = ", ".join(self.config.download.accepted_content_types)
                    return self._fail(
                        artifact, REJECTED,
                        f"Invalid content type for {url}: {ct!r} (expected one of {expected})",
                    )

                for chunk in resp.iter_bytes(chunk_size=65536):
                    content.extend(chunk)
                    if _expired(deadline):
                        return self._fail(
                            artifact, FAILED,
                            f"Timed out after {timeout}s downloading {url} "
                            f"({len(content):,} bytes received); not creating file",
                        )
        except httpx.HTTPError as e:
            return self._fail(artifact, FAILED, f"Failed to download {url}: {e}")

        if not content:
            return self._fail(artifact, REJECTED, f"Downloaded 0 bytes for {url}; not creating file")

        try:
            # "xb" refuses to clobber a file created since the existence check
            with open(local_path, "xb") as f:
                f.write(content)
        except OSError as e:
            return self._fail(artifact, FAILED, f"Failed to write PDF to {local_path} for {url}: {e}")

        artifact.status = DOWNLOADED
        artifact.file_size = len(content)
        logger.info(f"Successfully downloaded {len(content):,} bytes: {url} -> {local_path}")
        return artifact

    def fetch_text(self, url: str) -> str:
        """Fetch a page body as text. Raises httpx.HTTPError on failure."""
        resp = self.client.get(url, timeout=httpx.Timeout(self.config.download.page_timeout))
        resp.raise_for_status()
        return resp.text

    @staticmethod
    def _fail(artifact: Artifact, status: str, message: str) -> Artifact:
        if status == REJECTED:
            logger.warning(message)
        else:
            logger.error(message)
        artifact.status = status
        artifact.error = message
        return artifact


def _expired(deadline: Optional[float]) -> bool:
    return deadline is not None and time.monotonic() > deadline
