"""YAML config loader."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import yaml

DEFAULT_BASE_URL = "https://www.nclonline.com"


@dataclass
class DownloadConfig:
    timeout: float = 900  # 15 minutes per PDF request
    page_timeout: Optional[float] = None
    accepted_content_types: List[str] = field(
        default_factory=lambda: ["application/pdf", "binary/octet-stream"]
    )
    user_agent: str = ""


@dataclass
class SourceConfig:
    enabled: bool = True
    base_url: str = DEFAULT_BASE_URL
    description: str = ""


@dataclass
class AppConfig:
    output_dir: str = "PDFs"
    log_dir: str = "logs"
    log_level: str = "INFO"
    working_file: Optional[str] = None
    download: DownloadConfig = field(default_factory=DownloadConfig)
    sources: Dict[str, SourceConfig] = field(default_factory=dict)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    dl_raw = raw.get("download") or {}
    download = DownloadConfig(**{k: v for k, v in dl_raw.items() if k in DownloadConfig.__dataclass_fields__})

    sources = {}
    for name, src_raw in (raw.get("sources") or {}).items():
        sources[name] = SourceConfig(**{k: v for k, v in (src_raw or {}).items() if k in SourceConfig.__dataclass_fields__})

    return AppConfig(
        output_dir=raw.get("output_dir", "PDFs"),
        log_dir=raw.get("log_dir", "logs"),
        log_level=raw.get("log_level", "INFO"),
        working_file=raw.get("working_file"),
        download=download,
        sources=sources,
    )
