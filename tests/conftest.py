import os

import httpx
import pytest

from ncl_scraper.config import AppConfig
from ncl_scraper.downloader import Downloader

from tests.helpers import RecordingHandler


@pytest.fixture
def config(tmp_path):
    return AppConfig(
        output_dir=str(tmp_path / "PDFs"),
        log_dir=str(tmp_path / "logs"),
    )


@pytest.fixture
def output_dir(config):
    os.makedirs(config.output_dir)
    return config.output_dir


@pytest.fixture
def make_downloader(config):
    created = []

    def _make(routes=None):
        handler = RecordingHandler(routes)
        downloader = Downloader(config, transport=httpx.MockTransport(handler))
        created.append(downloader)
        return downloader, handler

    yield _make

    for downloader in created:
        downloader.close()
