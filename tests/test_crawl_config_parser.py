import pytest

from sitecrawl.services.crawl_config_parser import CrawlConfigParser, CrawlOptions


def test_parse_full_options():
    parser = CrawlConfigParser()
    options = parser.parse({
        "root_url": "https://ex.test/",
        "fetchers": 4,
        "max_depth": 3,
        "delay_seconds": 1,
        "verbose": False,
        "quiescence": "Grace",
        "grace_seconds": 0.5,
    })
    assert options == CrawlOptions(
        root_url="https://ex.test/",
        fetcher_count=4,
        max_depth=3,
        politeness_delay=1.0,
        verbose=False,
        quiescence="grace",
        grace_interval=0.5,
    )


def test_parse_empty_mapping_leaves_everything_unset():
    options = CrawlConfigParser().parse({})
    assert options == CrawlOptions()
    assert options.crawler_kwargs() == {}


def test_crawler_kwargs_skips_root_and_unset_values():
    options = CrawlConfigParser().parse({"root_url": "https://ex.test/", "max_depth": 1})
    assert options.crawler_kwargs() == {"max_depth": 1}


def test_parse_rejects_unknown_keys():
    with pytest.raises(ValueError, match="Unknown crawl option"):
        CrawlConfigParser().parse({"robots": True})


def test_parse_rejects_wrong_types():
    parser = CrawlConfigParser()
    with pytest.raises(ValueError, match="max_depth"):
        parser.parse({"max_depth": "deep"})
    with pytest.raises(ValueError, match="fetchers"):
        parser.parse({"fetchers": True})


def test_parse_rejects_unknown_quiescence():
    with pytest.raises(ValueError, match="Unknown quiescence mode"):
        CrawlConfigParser().parse({"quiescence": "whenever"})


def test_parse_requires_mapping():
    with pytest.raises(ValueError):
        CrawlConfigParser().parse(["not", "a", "dict"])
