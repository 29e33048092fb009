"""Shared fixtures for the Lumen test suite."""

import time

import pytest

from analysis.base import CheckInterface
from analysis.context import Context
from analysis.result import Result, Status

ARTICLE_HTML = """
<!DOCTYPE html>
<html>
<head>
  <title>Ignored when a title is supplied</title>
  <meta name="description" content="fallback description">
  <meta name="robots" content="index, follow">
  <link rel="canonical" href="https://example.com/blog/content-audit/">
  <meta property="og:title" content="Content audit checklist">
  <meta property="og:description" content="A practical content audit checklist.">
  <meta property="og:type" content="article">
  <meta property="og:url" content="https://example.com/blog/content-audit/">
  <meta property="og:image" content="https://example.com/cover.png">
  <meta name="twitter:card" content="summary_large_image">
  <meta name="twitter:title" content="Content audit checklist">
  <meta name="twitter:description" content="A practical content audit checklist.">
  <meta name="twitter:image" content="https://example.com/cover.png">
  <script type="application/ld+json">
  {"@context": "https://schema.org", "@graph": [
    {"@type": "Organization", "name": "Example"},
    {"@type": "WebSite", "url": "https://example.com/"},
    {"@type": "BlogPosting", "headline": "Content audit checklist",
     "speakable": {"@type": "SpeakableSpecification", "cssSelector": ["h1"]}}
  ]}
  </script>
</head>
<body>
  <h1>The content audit checklist</h1>
  <p>A content audit is a review of every page you publish.</p>
  <h2>Why run one?</h2>
  <p>Pages age. <a href="/blog/seo-basics/">Start with the basics</a> and come back.</p>
  <img src="/a.png" alt="Audit spreadsheet">
  <img src="/b.png" alt="Traffic chart">
</body>
</html>
"""


@pytest.fixture
def article_html() -> str:
    return ARTICLE_HTML


@pytest.fixture
def article_context(article_html) -> Context:
    return Context(
        document_id=42,
        html=article_html,
        title="Content audit checklist: how to review every page you own",
        meta_description="",
        focus_keyword="content audit",
        site_url="https://example.com/",
    )


def words(count: int, word: str = "word") -> str:
    """`count` space-separated copies of `word`."""
    return " ".join([word] * count)


class StubCheck(CheckInterface):
    """Check with a fixed outcome, for exercising the registry and analyzer."""

    def __init__(
        self,
        check_id: str,
        status: Status = Status.PASS,
        weight: float = 0.1,
        error: Exception | None = None,
        delay: float = 0.0,
        returns=None,
    ):
        self._id = check_id
        self._status = status
        self.weight = weight
        self._error = error
        self._delay = delay
        self._returns = returns

    @property
    def id(self) -> str:
        return self._id

    @property
    def label(self) -> str:
        return f"Stub {self._id}"

    @property
    def description(self) -> str:
        return "Returns a fixed status."

    def run(self, context: Context) -> Result:
        if self._delay:
            time.sleep(self._delay)
        if self._error is not None:
            raise self._error
        if self._returns is not None:
            return self._returns
        return self.result(self._status, {"stub": True}, f"{self._id} is {self._status.value}")


@pytest.fixture
def stub_check():
    return StubCheck
