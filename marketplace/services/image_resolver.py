# marketplace/services/image_resolver.py
import re
from dataclasses import dataclass
from enum import Enum

import requests
from requests import RequestException

from marketplace.domain.errors import UpstreamFetchFailure
from marketplace.utils.retry import http_retry
from marketplace.utils.settings import (
    DIRECT_IMAGE_HOST,
    IMAGE_RESOLVE_ATTEMPTS,
    IMAGE_RESOLVE_TIMEOUT,
    SHORTLINK_HOST,
)
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


class ResolutionOutcome(str, Enum):
    RESOLVED = "RESOLVED"
    UNCHANGED = "UNCHANGED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class ImageResolution:
    url: str
    outcome: ResolutionOutcome

    @property
    def changed(self) -> bool:
        return self.outcome is ResolutionOutcome.RESOLVED


class ImageResolver:
    """
    Zamienia link ze skracacza hostingu obrazkow na bezposredni URL obrazka.
    Best-effort: kazdy blad konczy sie oryginalnym URL (outcome FAILED),
    nigdy wyjatkiem.
    """

    def __init__(
        self,
        shortlink_host: str = SHORTLINK_HOST,
        direct_host: str = DIRECT_IMAGE_HOST,
        timeout: float | None = IMAGE_RESOLVE_TIMEOUT,
        attempts: int = IMAGE_RESOLVE_ATTEMPTS,
    ):
        self.shortlink_host = shortlink_host
        self.direct_host = direct_host
        self.timeout = timeout or None  # 0 -> brak timeoutu
        self.pattern = re.compile(
            r'<meta property="og:image" content="(https://'
            + re.escape(direct_host)
            + r'/[^"]+)"'
        )
        self._fetch = http_retry(attempts)(self._fetch_page)

    def is_shortlink(self, url: str) -> bool:
        return f"{self.shortlink_host}/" in url and f"{self.direct_host}/" not in url

    def _fetch_page(self, url: str) -> str:
        logger.info(f"ImageResolver GET {url}")
        resp = requests.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return resp.text

    def fetch_page(self, url: str) -> str:
        try:
            return self._fetch(url)
        except RequestException as e:
            raise UpstreamFetchFailure(str(e)) from e

    def resolve(self, url: str) -> ImageResolution:
        if not url or not self.is_shortlink(url):
            return ImageResolution(url=url, outcome=ResolutionOutcome.UNCHANGED)

        try:
            html = self.fetch_page(url)
        except UpstreamFetchFailure as e:
            logger.warning(f"Error resolving image URL {url}: {e}")
            return ImageResolution(url=url, outcome=ResolutionOutcome.FAILED)

        match = self.pattern.search(html)
        if not match:
            logger.info(f"No direct image link found for {url}, keeping original")
            return ImageResolution(url=url, outcome=ResolutionOutcome.UNCHANGED)

        logger.info(f"Resolved image {url} -> {match.group(1)}")
        return ImageResolution(url=match.group(1), outcome=ResolutionOutcome.RESOLVED)
