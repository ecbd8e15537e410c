"""Checking the links of a web site with a pool of crawler threads."""

from __future__ import annotations

import argparse
import ipaddress
import pprint
import queue
import sys
import threading
from dataclasses import dataclass, field
from urllib.parse import urljoin, urlsplit, urlunsplit

import requests
from bs4 import BeautifulSoup


class CrawlError(Exception):
    """A page could not be fetched."""


class BadResponseError(CrawlError):
    """A page was fetched but the server did not answer with success."""

    def __init__(self, status: str) -> None:
        super().__init__(f"bad http response: {status}")
        self.status = status


@dataclass(frozen=True)
class CrawlCommand:
    """A page to check, and whether to follow the links on it."""

    url: str
    extract_links: bool


@dataclass(frozen=True)
class _Outcome:
    url: str
    links: list[str] = field(default_factory=list)
    error: CrawlError | None = None


def _normalize(url: str) -> str:
    parts = urlsplit(url)
    if parts.scheme in ("http", "https") and parts.netloc and not parts.path:
        parts = parts._replace(path="/")
    return urlunsplit(parts)


def _domain(url: str) -> str | None:
    host = urlsplit(url).hostname
    if not host:
        return None
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return host
    return None


class CrawlState:
    """Which pages have been visited, and the domain whose links are followed."""

    def __init__(self, start_url: str) -> None:
        domain = _domain(start_url)
        if domain is None:
            raise ValueError(f"start URL {start_url!r} has no domain")
        self.domain = domain
        self.visited_pages: set[str] = {_normalize(start_url)}

    def should_extract_links(self, url: str) -> bool:
        """Tell whether the links on the given page should be followed."""
        return _domain(url) == self.domain

    def mark_visited(self, url: str) -> bool:
        """Mark the page visited; return False if it already was."""
        url = _normalize(url)
        if url in self.visited_pages:
            return False
        self.visited_pages.add(url)
        return True


def visit_page(session: requests.Session, command: CrawlCommand) -> list[str]:
    """Fetch a page and return the absolute URLs of its links, if wanted."""
    print(f"Checking {command.url}")
    try:
        response = session.get(command.url)
    except requests.RequestException as exc:
        raise CrawlError(f"request error: {exc}") from exc
    if not 200 <= response.status_code < 300:
        raise BadResponseError(f"{response.status_code} {response.reason or ''}".strip())

    if not command.extract_links:
        return []

    base_url = response.url
    document = BeautifulSoup(response.text, "html.parser")
    links = []
    for element in document.find_all("a", href=True):
        href = element["href"]
        try:
            links.append(_normalize(urljoin(base_url, href)))
        except ValueError as exc:
            print(f"On {base_url}: ignored unparsable {href!r}: {exc}")
    return links


def _crawl_worker(command_queue: queue.Queue, result_queue: queue.Queue) -> None:
    with requests.Session() as session:
        while (command := command_queue.get()) is not None:
            try:
                links = visit_page(session, command)
            except CrawlError as error:
                result_queue.put(_Outcome(command.url, error=error))
            else:
                result_queue.put(_Outcome(command.url, links=links))


def spawn_crawler_threads(
    command_queue: queue.Queue, result_queue: queue.Queue, thread_count: int
) -> list[threading.Thread]:
    """Start threads that fetch pages until they receive None as a command."""
    threads = [
        threading.Thread(
            target=_crawl_worker, args=(command_queue, result_queue), daemon=True
        )
        for _ in range(thread_count)
    ]
    for thread in threads:
        thread.start()
    return threads


def control_crawl(
    start_url: str, command_queue: queue.Queue, result_queue: queue.Queue
) -> list[str]:
    """Hand out pages to the crawlers until none are left; return the bad URLs."""
    start_url = _normalize(start_url)
    state = CrawlState(start_url)
    command_queue.put(CrawlCommand(start_url, extract_links=True))
    pending = 1

    bad_urls = []
    while pending > 0:
        outcome = result_queue.get()
        pending -= 1
        if outcome.error is not None:
            bad_urls.append(outcome.url)
            print(f"Got crawling error: {outcome.error}")
            continue
        for url in outcome.links:
            if state.mark_visited(url):
                command_queue.put(CrawlCommand(url, state.should_extract_links(url)))
                pending += 1
    return bad_urls


def check_links(start_url: str, thread_count: int = 16) -> list[str]:
    """Crawl the site from the start URL and return the URLs that failed."""
    command_queue: queue.Queue = queue.Queue()
    result_queue: queue.Queue = queue.Queue()
    threads = spawn_crawler_threads(command_queue, result_queue, thread_count)
    try:
        return control_crawl(start_url, command_queue, result_queue)
    finally:
        for _ in threads:
            command_queue.put(None)
        for thread in threads:
            thread.join()


def main(argv: list[str] | None = None) -> int:
    """Check the links reachable from a start URL and print the bad ones."""
    parser = argparse.ArgumentParser(description="Check the links of a web site.")
    parser.add_argument("start_url")
    parser.add_argument("--threads", type=int, default=16)
    args = parser.parse_args(argv)
    try:
        bad_urls = check_links(args.start_url, args.threads)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Bad URLs: {pprint.pformat(bad_urls)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())