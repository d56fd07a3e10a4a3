import argparse
import logging
import signal
import sys
import threading
from typing import Optional

from sitecrawl.container import Container
from sitecrawl.domain.config import QUIESCENCE_MODES
from sitecrawl.exceptions import CrawlerUrlError

logger = logging.getLogger("sitecrawl")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Crawl every page of one domain up to a link depth.",
    )
    parser.add_argument("url", nargs="?", help="Root URL to start from (overrides root_url in --config)")
    parser.add_argument("--config", help="YAML file with crawl options")
    parser.add_argument("--fetchers", type=int, dest="fetcher_count", help="Number of fetcher threads")
    parser.add_argument("--depth", type=int, dest="max_depth", help="Maximum link depth")
    parser.add_argument("--delay", type=float, dest="politeness_delay", help="Seconds to wait after each dispatch")
    parser.add_argument("--quiescence", choices=QUIESCENCE_MODES, help="How the end of the crawl is detected")
    parser.add_argument("--quiet", action="store_true", help="Do not narrate visit decisions")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    return parser


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s",
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def main(argv=None, container: Optional[Container] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    container = container or Container()

    overrides = {}
    root_url = args.url
    if args.config:
        data = container.config_file_store().load_yaml_dict(args.config)
        if data is None:
            print(f"Error: could not read crawl options from '{args.config}'", file=sys.stderr)
            return 2
        try:
            options = container.crawl_config_parser().parse(data)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        overrides.update(options.crawler_kwargs())
        root_url = root_url or options.root_url

    if not root_url:
        print("Error: a root URL is required (positional or root_url in --config)", file=sys.stderr)
        return 2

    for key in ("fetcher_count", "max_depth", "politeness_delay", "quiescence"):
        value = getattr(args, key)
        if value is not None:
            overrides[key] = value
    if args.quiet:
        overrides["verbose"] = False

    try:
        crawler = container.crawler(root_url, **overrides)
    except CrawlerUrlError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    stop_event = threading.Event()

    def handle_signal(signum, frame):
        logger.info("Received signal %s, stopping crawl...", signum)
        stop_event.set()

    if threading.current_thread() is threading.main_thread():
        signal.signal(signal.SIGINT, handle_signal)
        signal.signal(signal.SIGTERM, handle_signal)

    try:
        crawler.start(stop_event=stop_event)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    finally:
        container.http_service().close()

    for url in sorted(crawler.visited):
        print(url)
    return 0


if __name__ == '__main__':
    sys.exit(main())
