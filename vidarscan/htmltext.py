"""Visible text extraction from HTML documents."""

from __future__ import annotations

from html.parser import HTMLParser

REMOVED_TAGS = frozenset({"script", "style"})


class _TextCollector(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.texts: list[str] = []
        self._skip_depth = 0

    def handle_starttag(self, tag, attrs):
        if tag in REMOVED_TAGS:
            self._skip_depth += 1

    def handle_endtag(self, tag):
        if tag in REMOVED_TAGS and self._skip_depth:
            self._skip_depth -= 1

    def handle_data(self, data):
        if self._skip_depth:
            return
        content = data.strip()
        if content:
            self.texts.append(content)


def html_to_text(html_data: str) -> str:
    """Return the text nodes of ``html_data``, trimmed and joined by spaces.

    Contents of ``script`` and ``style`` elements are dropped.
    """
    collector = _TextCollector()
    collector.feed(html_data)
    collector.close()
    return " ".join(collector.texts)