"""Single GET probe of a candidate URL."""

from __future__ import annotations

import random
from typing import Callable, Optional

import requests

from .htmltext import html_to_text

USER_AGENTS = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/125.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:126.0) Gecko/20100101 Firefox/126.0",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.5 Safari/605.1.15",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Edg/125.0.0.0",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/125.0.0.0 Safari/537.36",
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_5_1 like Mac OS X) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.5 Mobile/15E148 Safari/604.1",
)
ACCEPT_LANGUAGE = "zh-CN,zh;q=0.8,zh-TW;q=0.7,zh-HK;q=0.5,en-US;q=0.3,en;q=0.2"

BODY_LIMIT = 4096
REQUEST_TIMEOUT = 10.0
NOT_FOUND_LABEL = "__label__404"

Classifier = Callable[[str], str]


def random_headers() -> dict[str, str]:
    """Return request headers with a randomly chosen browser User-Agent."""
    return {"User-Agent": random.choice(USER_AGENTS), "Accept-Language": ACCEPT_LANGUAGE}


def _read_prefix(response: requests.Response, limit: int) -> bytes:
    buffer = bytearray()
    for chunk in response.iter_content(chunk_size=limit):
        buffer.extend(chunk)
        if len(buffer) >= limit:
            break
    return bytes(buffer[:limit])


def send_message(
    session: requests.Session, url: str, classifier: Optional[Classifier] = None
) -> bool:
    """GET ``url`` and report it when it looks like a real page.

    Only the first 4096 bytes of the body are read. A 2xx response whose text
    the classifier does not label as a not-found page is printed and ``True``
    is returned. Without a classifier every 2xx response is reported; a
    classifier that raises counts as no finding. Network errors propagate.
    """
    with session.get(
        url, headers=random_headers(), timeout=REQUEST_TIMEOUT, stream=True
    ) as response:
        body = _read_prefix(response, BODY_LIMIT)
        status = response.status_code

    text = html_to_text(body.decode("utf-8", errors="replace"))

    if not 200 <= status < 300:
        return False
    print("请求成功")

    if classifier is not None:
        try:
            label = classifier(text)
        except Exception:  # noqa: BLE001 - a failed prediction is not a finding
            return False
        if label == NOT_FOUND_LABEL:
            return False

    print(f"[found] {status:<6d} {url}")
    return True