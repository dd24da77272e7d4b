import httpx
import pytest

from ncl_scraper import main as cli
from ncl_scraper.config import SourceConfig
from ncl_scraper.downloader import Downloader
from ncl_scraper.models import RunStats

from tests.helpers import BASE_URL, RecordingHandler, html, pdf


@pytest.fixture
def mocked_downloader(monkeypatch):
    handler = RecordingHandler()

    def factory(config):
        return Downloader(config, transport=httpx.MockTransport(handler))

    monkeypatch.setattr(cli, "Downloader", factory)
    return handler


def test_format_bytes():
    assert cli._format_bytes(512) == "512 B"
    assert cli._format_bytes(2048) == "2.0 KB"
    assert cli._format_bytes(5 * 1024 ** 2) == "5.0 MB"
    assert cli._format_bytes(3 * 1024 ** 3) == "3.00 GB"


def test_disabled_source_is_skipped(config, mocked_downloader, capsys):
    config.sources["nclonline"] = SourceConfig(enabled=False)

    assert cli.run_scraper(config) == {}
    assert mocked_downloader.calls == []
    assert "Disabled in config" in capsys.readouterr().out


def test_run_scraper_downloads_linked_pdfs(config, mocked_downloader, monkeypatch, capsys):
    config.sources["nclonline"] = SourceConfig(description="NCL product SDS sheets")
    monkeypatch.setattr(
        "ncl_scraper.sources.nclonline.NCLOnlineSource.PRODUCT_SLUGS", ["ASAP"]
    )
    mocked_downloader.routes.update({
        BASE_URL + "/products/view/ASAP": html('<a href="/uploads/sds/ASAP_SDS.pdf">SDS</a>'),
        BASE_URL + "/uploads/sds/ASAP_SDS.pdf": pdf(),
    })

    results = cli.run_scraper(config, "nclonline")

    stats = results["nclonline"]
    assert stats.pages_fetched == 1
    assert stats.pages_failed == 2
    assert stats.downloaded == 1
    assert "NCL product SDS sheets" in capsys.readouterr().out


def test_show_stats(capsys):
    cli.show_stats({"nclonline": RunStats(pages_fetched=3, pages_failed=1, discovered=4,
                                          downloaded=2, skipped=2, total_bytes=4096)})

    out = capsys.readouterr().out
    assert "RUN SUMMARY" in out
    assert "3/4" in out
    assert "4.0 KB" in out


def test_main_uses_config_and_output_override(tmp_path, mocked_downloader, capsys, monkeypatch):
    monkeypatch.delenv("NCL_SCRAPER_CONFIG", raising=False)
    monkeypatch.setattr(cli, "setup_logger", lambda *args: None)
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "sources:\n"
        "  nclonline:\n"
        "    enabled: false\n"
    )
    out_dir = tmp_path / "out"

    cli.main(["--config", str(config_path), "--output-dir", str(out_dir)])

    out = capsys.readouterr().out
    assert f"Output directory: {out_dir}" in out
    assert mocked_downloader.calls == []
