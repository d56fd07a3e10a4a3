"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from sitecrawl import config as env
from sitecrawl.crawler import Crawler
from sitecrawl.services.config_file_store import ConfigFileStore
from sitecrawl.services.crawl_config_parser import CrawlConfigParser
from sitecrawl.services.http_service import HttpService
from sitecrawl.services.link_extractor import LinkExtractor


# Environment variables used by the container (read via `sitecrawl.config` helpers).
#
# USER_AGENT (str, default: "SiteCrawl/0.1")
#   User-Agent header for HEAD probes and page fetches.
#
# HTTP_TIMEOUT (int seconds, default: 10)
#   Timeout for outbound HTTP requests.
#
# CRAWL_DELAY (float seconds, default: 0.25)
#   Politeness delay the coordinator sleeps after every dispatch.
#
# FETCHER_COUNT (int, default: 2)
#   Number of worker threads.
#
# DEFAULT_DEPTH (int, default: 2)
#   Link depth limit; tasks at this depth are recorded but not fetched.
#
# SITECRAWL_GRACE_INTERVAL (float seconds, default: 2.0)
#   Wait before the queue-emptiness check when quiescence mode is "grace".
#
# SITECRAWL_POLL_INTERVAL (float seconds, default: 0.05)
#   Coordinator back-off while the discovery queue is empty in "in_flight" mode.
#
# SITECRAWL_QUIESCENCE (str, default: "in_flight")
#   "in_flight" (counter-based completion) or "grace" (sleep then check queues).
#
# SITECRAWL_VERBOSE (bool, default: true)
#   Narrate visit decisions and domain mismatches at INFO instead of DEBUG.
ENV = {
    "USER_AGENT": env.USER_AGENT,
    "HTTP_TIMEOUT": env.HTTP_TIMEOUT,
    "CRAWL_DELAY": env.CRAWL_DELAY,
    "FETCHER_COUNT": env.FETCHER_COUNT,
    "DEFAULT_DEPTH": env.DEFAULT_DEPTH,
    "SITECRAWL_GRACE_INTERVAL": env.GRACE_INTERVAL,
    "SITECRAWL_POLL_INTERVAL": env.POLL_INTERVAL,
    "SITECRAWL_QUIESCENCE": env.QUIESCENCE,
    "SITECRAWL_VERBOSE": env.VERBOSE,
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for SiteCrawl."""

    config = providers.Configuration(default=ENV)

    # One session shared by every worker of every crawl built here
    http_session = providers.Singleton(requests.Session)

    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        session=http_session,
        timeout=config.HTTP_TIMEOUT.as_(int),
    )

    link_extractor = providers.Singleton(
        LinkExtractor
    )

    config_file_store = providers.Singleton(
        ConfigFileStore
    )

    crawl_config_parser = providers.Singleton(
        CrawlConfigParser
    )

    # Call with root_url=...; any other Crawler keyword overrides the env default.
    crawler = providers.Factory(
        Crawler,
        http_service=http_service,
        link_extractor=link_extractor,
        fetcher_count=config.FETCHER_COUNT.as_(int),
        max_depth=config.DEFAULT_DEPTH.as_(int),
        verbose=config.SITECRAWL_VERBOSE.as_(bool),
        politeness_delay=config.CRAWL_DELAY.as_(float),
        grace_interval=config.SITECRAWL_GRACE_INTERVAL.as_(float),
        poll_interval=config.SITECRAWL_POLL_INTERVAL.as_(float),
        quiescence=config.SITECRAWL_QUIESCENCE.as_(str),
    )
