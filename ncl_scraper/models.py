"""Data models for the scraper."""

from dataclasses import dataclass
from typing import Optional

DOWNLOADED = "downloaded"
SKIPPED = "skipped"
REJECTED = "rejected"
FAILED = "failed"


@dataclass
class Artifact:
    url: str
    filename: str
    local_path: str
    status: str = "pending"  # downloaded, skipped, rejected, failed
    file_size: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == DOWNLOADED


@dataclass
class RunStats:
    pages_fetched: int = 0
    pages_failed: int = 0
    discovered: int = 0
    invalid: int = 0
    downloaded: int = 0
    skipped: int = 0
    rejected: int = 0
    failed: int = 0
    total_bytes: int = 0

    def record(self, artifact: Artifact):
        if artifact.ok:
            self.downloaded += 1
            self.total_bytes += artifact.file_size
        elif artifact.status == SKIPPED:
            self.skipped += 1
        elif artifact.status == REJECTED:
            self.rejected += 1
        else:
            self.failed += 1
