"""Document feature extraction shared by all checks."""

import logging
import re
import threading
from collections.abc import Iterable
from typing import NamedTuple

from bs4 import BeautifulSoup, Tag
from bs4.element import PreformattedString

logger = logging.getLogger(__name__)

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]

# Elements whose text never reaches the reader
HIDDEN_TEXT_TAGS = {"script", "style", "noscript", "template"}

_WHITESPACE_RE = re.compile(r"\s+")

_UNSET = object()


class Heading(NamedTuple):
    """A heading in document order."""

    level: int
    text: str


class Context:
    """
    Read-only view of one document for the duration of an analysis run.

    Holds the raw HTML and the metadata resolved by the caller. The DOM is
    parsed on first use, exactly once, and every derived feature is
    computed from it. Accessors never raise on malformed input: they
    degrade to empty values and leave it to each check to decide what
    absence means.
    """

    def __init__(
        self,
        document_id: int | None = None,
        html: str = "",
        title: str = "",
        meta_description: str = "",
        canonical: str | None = None,
        robots: str | None = None,
        focus_keyword: str = "",
        secondary_keywords: Iterable[str] = (),
        site_url: str | None = None,
    ):
        self.document_id = document_id
        self.html = html or ""
        self.focus_keyword = focus_keyword or ""
        self.secondary_keywords = tuple(
            keyword.strip() for keyword in secondary_keywords if keyword and keyword.strip()
        )
        self.site_url = site_url

        self._title = title or ""
        self._meta_description = meta_description or ""
        self._canonical = canonical
        self._robots = robots

        self._dom = _UNSET
        self._dom_lock = threading.Lock()
        self._plain_text: str | None = None

    def __repr__(self) -> str:
        return f"Context(document_id={self.document_id!r}, html_length={len(self.html)})"

    # =========================================================================
    # Parsing
    # =========================================================================

    def dom(self) -> BeautifulSoup | None:
        """Return the parsed document, or None for empty/unparsable HTML."""
        if self._dom is _UNSET:
            with self._dom_lock:
                if self._dom is _UNSET:
                    self._dom = self._parse()
        return self._dom

    def _parse(self) -> BeautifulSoup | None:
        if not self.html.strip():
            return None

        try:
            return BeautifulSoup(self.html, "lxml")
        except Exception as e:
            logger.warning(f"Could not parse HTML for document {self.document_id}: {e}")
            return None

    # =========================================================================
    # Metadata with DOM fallback
    # =========================================================================

    def title(self) -> str:
        """Explicit title, else the <title> element text, else ""."""
        if self._title.strip():
            return self._title.strip()

        soup = self.dom()
        if soup is None:
            return ""

        title_tag = soup.find("title")
        return title_tag.get_text(strip=True) if title_tag else ""

    def meta_description(self) -> str:
        """Explicit description, else <meta name="description">, else ""."""
        if self._meta_description.strip():
            return self._meta_description.strip()
        return self.meta_content("name", "description")

    def canonical(self) -> str | None:
        """Explicit canonical URL, else <link rel="canonical">, else None."""
        if self._canonical and self._canonical.strip():
            return self._canonical.strip()
        return self.link_href("canonical") or None

    def robots(self) -> str | None:
        """Explicit robots directive, else <meta name="robots">, else None."""
        if self._robots and self._robots.strip():
            return self._robots.strip()
        return self.meta_content("name", "robots") or None

    def meta_content(self, attribute: str, value: str) -> str:
        """
        Content of the first <meta> whose `attribute` equals `value`.

        Args:
            attribute: Attribute to match on, usually "name" or "property"
            value: Exact (case-sensitive) attribute value, e.g. "og:title"

        Returns:
            The stripped content attribute, or "" when no tag matches
        """
        soup = self.dom()
        if soup is None:
            return ""

        for meta in soup.find_all("meta"):
            if meta.get(attribute) == value:
                return (meta.get("content") or "").strip()

        return ""

    def link_href(self, rel: str) -> str:
        """Href of the first <link> carrying the `rel` token, or ""."""
        soup = self.dom()
        if soup is None:
            return ""

        wanted = rel.lower()
        for link in soup.find_all("link"):
            tokens = link.get("rel") or []
            if isinstance(tokens, str):
                tokens = tokens.split()
            if wanted in (token.lower() for token in tokens):
                return (link.get("href") or "").strip()

        return ""

    # =========================================================================
    # Structure
    # =========================================================================

    def ordered_headings(self) -> list[Heading]:
        """Non-empty H1-H6 headings in the order they appear in the source."""
        soup = self.dom()
        if soup is None:
            return []

        headings = []
        for tag in soup.find_all(HEADING_TAGS):
            text = tag.get_text(" ", strip=True)
            if text:
                headings.append(Heading(level=int(tag.name[1]), text=text))

        return headings

    def images(self) -> list[Tag]:
        soup = self.dom()
        return soup.find_all("img") if soup is not None else []

    def anchors(self) -> list[Tag]:
        soup = self.dom()
        return soup.find_all("a") if soup is not None else []

    def json_ld_blocks(self) -> list[str]:
        """
        Raw text of every JSON-LD script block.

        Blocks are returned undecoded so a malformed one only affects the
        checks that try to read it.
        """
        soup = self.dom()
        if soup is None:
            return []

        blocks = []
        for script in soup.find_all("script"):
            if (script.get("type") or "").strip().lower() != "application/ld+json":
                continue
            blocks.append(script.get_text().strip())

        return blocks

    # =========================================================================
    # Text
    # =========================================================================

    def plain_text(self) -> str:
        """Visible document text with whitespace collapsed."""
        if self._plain_text is None:
            self._plain_text = self._extract_text()
        return self._plain_text

    def _extract_text(self) -> str:
        soup = self.dom()
        if soup is None:
            return ""

        parts = []
        for node in soup.find_all(string=True):
            if isinstance(node, PreformattedString):
                continue
            if node.parent is not None and node.parent.name in HIDDEN_TEXT_TAGS:
                continue
            parts.append(str(node))

        return _WHITESPACE_RE.sub(" ", " ".join(parts)).strip()

    def word_count(self) -> int:
        text = self.plain_text()
        return len(text.split()) if text else 0

    # =========================================================================
    # Keywords
    # =========================================================================

    def has_focus_keyword(self) -> bool:
        return bool(self.focus_keyword.strip())

    def all_keywords(self) -> list[str]:
        """Focus keyword (if any) followed by the secondary keywords."""
        keywords = [self.focus_keyword.strip()] if self.has_focus_keyword() else []
        return keywords + list(self.secondary_keywords)
