"""Body content checks: internal linking, AI-friendly structure and search intent."""

import math
from urllib.parse import urlparse

from analysis.base import CheckInterface
from analysis.context import Context
from analysis.intent import Intent, SearchIntentDetector
from analysis.result import Result, Status

IGNORED_LINK_PREFIXES = ("#", "mailto:", "tel:", "javascript:")


def _host(url: str | None) -> str:
    if not url:
        return ""
    try:
        return (urlparse(url.strip()).hostname or "").lower()
    except ValueError:
        return ""


def _is_internal(href: str, site_host: str) -> bool:
    if not href or href.lower().startswith(IGNORED_LINK_PREFIXES):
        return False

    try:
        parsed = urlparse(href)
    except ValueError:
        return False

    if parsed.scheme and parsed.scheme.lower() not in ("http", "https"):
        return False

    host = (parsed.hostname or "").lower()
    if not host:
        # Relative links always stay on the site
        return not parsed.scheme

    return bool(site_host) and host == site_host


class InternalLinksCheck(CheckInterface):
    """Enough links back into the same site for the length of the text."""

    WORDS_PER_LINK = 300
    MIN_WORDS = 150

    weight = 0.10

    @property
    def id(self) -> str:
        return "internal_links"

    @property
    def label(self) -> str:
        return "Internal links"

    @property
    def description(self) -> str:
        return "Checks that the content links to other pages of the same site."

    def required_links(self, word_count: int) -> int:
        if word_count < self.MIN_WORDS:
            return 0
        return max(1, math.ceil(word_count / self.WORDS_PER_LINK))

    def run(self, context: Context) -> Result:
        site_host = _host(context.site_url)
        words = context.word_count()
        required = self.required_links(words)

        links = 0
        for anchor in context.anchors():
            if _is_internal((anchor.get("href") or "").strip(), site_host):
                links += 1

        details = {"links": links, "required": required, "word_count": words}

        if required == 0 or links >= required:
            return self.result(
                Status.PASS,
                details,
                f"Found {links} internal link(s) for {words} words.",
            )

        if links == 0:
            return self.result(
                Status.FAIL,
                details,
                f"Add at least {required} internal link(s) to related content on this site.",
            )

        return self.result(
            Status.WARN,
            details,
            f"Found {links} internal link(s); add {required - links} more for {words} words.",
        )


class AiOptimizedContentCheck(CheckInterface):
    """
    Structure that makes text easy for AI assistants to quote.

    Points are awarded for lists, questions, short paragraphs, tables and a
    reasonable length, out of a maximum of MAX_POINTS. The percentage of
    points reached decides the status.
    """

    MIN_TEXT_LENGTH = 100
    MAX_POINTS = 12
    PASS_PERCENTAGE = 75
    WARN_PERCENTAGE = 50

    weight = 0.09

    @property
    def id(self) -> str:
        return "ai_optimized_content"

    @property
    def label(self) -> str:
        return "AI-optimized content"

    @property
    def description(self) -> str:
        return (
            "Checks that content is structured for AI overviews: lists, "
            "questions, short paragraphs and tables."
        )

    def analyze(self, context: Context) -> dict:
        soup = context.dom()
        text = context.plain_text()

        lists = len(soup.find_all(["ul", "ol"])) if soup is not None else 0
        tables = len(soup.find_all("table")) if soup is not None else 0
        paragraphs = []
        if soup is not None:
            for paragraph in soup.find_all("p"):
                paragraph_text = paragraph.get_text(" ", strip=True)
                if paragraph_text:
                    paragraphs.append(len(paragraph_text.split()))

        avg_paragraph_words = round(sum(paragraphs) / len(paragraphs)) if paragraphs else 0

        return {
            "lists": lists,
            "questions": text.count("?"),
            "paragraphs": len(paragraphs),
            "avg_paragraph_words": avg_paragraph_words,
            "tables": tables,
            "word_count": context.word_count(),
        }

    def points(self, analysis: dict) -> int:
        points = 0

        if analysis["lists"] >= 2:
            points += 3
        elif analysis["lists"] >= 1:
            points += 2

        if analysis["questions"] >= 3:
            points += 3
        elif analysis["questions"] >= 1:
            points += 2

        if analysis["avg_paragraph_words"] <= 150:
            points += 3
        elif analysis["avg_paragraph_words"] <= 250:
            points += 2

        if analysis["tables"]:
            points += 1

        words = analysis["word_count"]
        if 300 <= words <= 2000:
            points += 2
        elif words > 2000:
            points += 1

        return points

    def run(self, context: Context) -> Result:
        if len(context.plain_text()) < self.MIN_TEXT_LENGTH:
            return self.result(
                Status.WARN,
                {"error": "insufficient_content"},
                "Not enough content to evaluate. Write at least a few paragraphs.",
            )

        analysis = self.analyze(context)
        points = self.points(analysis)
        percentage = round(points / self.MAX_POINTS * 100)
        details = {**analysis, "points": points, "score_percentage": percentage}

        if percentage >= self.PASS_PERCENTAGE:
            return self.result(
                Status.PASS,
                details,
                f"Content is well structured for AI overviews ({percentage}%).",
            )

        suggestions = []
        if analysis["lists"] == 0:
            suggestions.append("add bulleted or numbered lists")
        if analysis["questions"] == 0:
            suggestions.append("phrase key sections as questions")
        if analysis["avg_paragraph_words"] > 150:
            suggestions.append("split long paragraphs")
        if not analysis["tables"]:
            suggestions.append("summarise comparisons in a table")

        message = f"Content structure scores {percentage}% for AI overviews."
        if suggestions:
            message += f" Try to {', '.join(suggestions)}."

        status = Status.WARN if percentage >= self.WARN_PERCENTAGE else Status.FAIL
        return self.result(status, details, message)


class SearchIntentCheck(CheckInterface):
    """Whether the text clearly serves one search intent."""

    MIN_CONFIDENCE = 0.5

    weight = 0.06

    def __init__(self, detector: SearchIntentDetector | None = None):
        self.detector = detector or SearchIntentDetector()

    @property
    def id(self) -> str:
        return "search_intent"

    @property
    def label(self) -> str:
        return "Search intent"

    @property
    def description(self) -> str:
        return "Detects the search intent of the content and how clearly it is expressed."

    def run(self, context: Context) -> Result:
        text = context.plain_text()
        if not text:
            return self.result(
                Status.WARN,
                {"intent": Intent.UNKNOWN.value, "confidence": 0.0, "signals": []},
                "No content available to detect the search intent.",
            )

        detection = self.detector.detect(context.title(), text)
        details = {
            "intent": detection.intent.value,
            "confidence": detection.confidence,
            "signals": list(detection.signals),
            "recommendations": self.detector.recommendations(detection.intent),
        }

        if detection.intent is Intent.UNKNOWN:
            return self.result(
                Status.WARN,
                details,
                "No clear search intent detected. Make the goal of the content explicit.",
            )

        if detection.confidence < self.MIN_CONFIDENCE:
            return self.result(
                Status.WARN,
                details,
                f"Search intent looks {detection.intent.value} but the signal is weak "
                f"({detection.confidence:.0%}). Strengthen it with matching keywords.",
            )

        return self.result(
            Status.PASS,
            details,
            f"Clear {detection.intent.value} search intent ({detection.confidence:.0%}).",
        )
