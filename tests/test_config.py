import pytest

from ncl_scraper.config import DEFAULT_BASE_URL, AppConfig, load_config


def test_defaults():
    config = AppConfig()
    assert config.output_dir == "PDFs"
    assert config.working_file is None
    assert config.download.timeout == 900
    assert config.download.page_timeout is None
    assert config.download.accepted_content_types == ["application/pdf", "binary/octet-stream"]


def test_load_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "output_dir: out\n"
        "log_level: DEBUG\n"
        "working_file: pages.html\n"
        "download:\n"
        "  timeout: 60\n"
        "  retries: 5\n"
        "sources:\n"
        "  nclonline:\n"
        "    enabled: false\n"
        "    api_token: ignored\n"
    )

    config = load_config(str(path))

    assert config.output_dir == "out"
    assert config.log_level == "DEBUG"
    assert config.log_dir == "logs"
    assert config.working_file == "pages.html"
    assert config.download.timeout == 60
    assert config.download.accepted_content_types == ["application/pdf", "binary/octet-stream"]
    assert config.sources["nclonline"].enabled is False
    assert config.sources["nclonline"].base_url == DEFAULT_BASE_URL


def test_empty_config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")

    assert load_config(str(path)) == AppConfig()


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


def test_shipped_config_loads():
    import os

    root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    config = load_config(os.path.join(root, "config.yaml"))

    assert config.download.timeout == 900
    assert config.sources["nclonline"].base_url == DEFAULT_BASE_URL
