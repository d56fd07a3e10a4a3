"""
Tests for run.py main() with an injected container.
"""
from unittest.mock import Mock, patch

import pytest
from dependency_injector import providers

from run import build_parser, main
from sitecrawl.container import Container


@pytest.fixture
def container(fake_site):
    container = Container()
    container.config.CRAWL_DELAY.from_value(0.0)
    container.config.SITECRAWL_POLL_INTERVAL.from_value(0.005)
    container.config.SITECRAWL_VERBOSE.from_value(False)
    container.http_service.override(providers.Object(fake_site))
    return container


@pytest.fixture(autouse=True)
def no_signal_handlers():
    with patch("run.signal.signal") as mock_signal:
        yield mock_signal


def test_parser_maps_flags_to_crawler_keywords():
    args = build_parser().parse_args(["https://ex.test/", "--fetchers", "3", "--depth", "1", "--delay", "0.5"])
    assert args.url == "https://ex.test/"
    assert args.fetcher_count == 3
    assert args.max_depth == 1
    assert args.politeness_delay == 0.5
    assert args.quiescence is None
    assert args.quiet is False


def test_main_crawls_and_prints_visited(fake_site, container, capsys):
    fake_site.add_page("https://ex.test/", "/b", "/a", "https://other.test/x")
    fake_site.add_page("https://ex.test/a")
    fake_site.add_page("https://ex.test/b")

    rc = main(["https://ex.test/", "--quiet"], container=container)

    assert rc == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["https://ex.test/", "https://ex.test/a", "https://ex.test/b"]


def test_main_installs_signal_handlers(fake_site, container, no_signal_handlers):
    fake_site.add_page("https://ex.test/")

    assert main(["https://ex.test/"], container=container) == 0
    assert no_signal_handlers.call_count == 2


def test_main_rejects_bad_root_url(container, capsys):
    rc = main(["ftp://ex.test/"], container=container)
    assert rc == 2
    assert "Invalid root URL" in capsys.readouterr().err


def test_main_requires_root_url(container, capsys):
    rc = main([], container=container)
    assert rc == 2
    assert "root URL is required" in capsys.readouterr().err


def test_main_rejects_invalid_settings(container, capsys):
    rc = main(["https://ex.test/", "--fetchers", "0"], container=container)
    assert rc == 2
    assert "fetcher_count" in capsys.readouterr().err


def test_main_reads_yaml_options(fake_site, container, tmp_path, capsys):
    fake_site.add_page("https://ex.test/", "/a")
    fake_site.add_page("https://ex.test/a", "/deeper")
    fake_site.add_page("https://ex.test/deeper")
    cfg = tmp_path / "site.yml"
    cfg.write_text("root_url: https://ex.test/\nmax_depth: 1\nfetchers: 1\n", encoding="utf-8")

    rc = main(["--config", str(cfg)], container=container)

    assert rc == 0
    assert capsys.readouterr().out.splitlines() == ["https://ex.test/", "https://ex.test/a"]
    assert fake_site.probed == ["https://ex.test/"]


def test_main_cli_flags_override_yaml(fake_site, container, tmp_path, capsys):
    fake_site.add_page("https://ex.test/", "/a")
    fake_site.add_page("https://ex.test/a")
    cfg = tmp_path / "site.yml"
    cfg.write_text("root_url: https://ex.test/\nmax_depth: 5\n", encoding="utf-8")

    rc = main(["--config", str(cfg), "--depth", "0"], container=container)

    assert rc == 0
    assert capsys.readouterr().out.splitlines() == ["https://ex.test/"]
    assert fake_site.probed == []


def test_main_reports_unreadable_config(container, tmp_path, capsys):
    rc = main(["https://ex.test/", "--config", str(tmp_path / "missing.yml")], container=container)
    assert rc == 2
    assert "could not read crawl options" in capsys.readouterr().err


def test_main_reports_invalid_yaml_options(container, tmp_path, capsys):
    cfg = tmp_path / "bad.yml"
    cfg.write_text("max_depth: deep\n", encoding="utf-8")

    rc = main(["https://ex.test/", "--config", str(cfg)], container=container)
    assert rc == 2
    assert "max_depth" in capsys.readouterr().err


def test_main_closes_http_service(container):
    service = Mock()
    service.probe.return_value = Mock(status_code=200, content_type="image/png")
    container.http_service.override(providers.Object(service))

    assert main(["https://ex.test/"], container=container) == 0
    service.close.assert_called_once()
    service.fetch.assert_not_called()
