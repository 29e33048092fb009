"""Checks on head metadata: title, description, canonical and robots."""

from urllib.parse import urlparse

from analysis.base import CheckInterface
from analysis.context import Context
from analysis.result import Result, Status
from analysis.text import contains_keyword, contains_keyword_words


class TitleLengthCheck(CheckInterface):
    """
    Title length within 50-60 characters, with the focus keyword present.

    Titles shorter than 35 or longer than 78 characters fail outright;
    anything else outside the recommended range is a warning.
    """

    MIN_LENGTH = 50
    MAX_LENGTH = 60
    CRITICAL_MIN = max(30, int(MIN_LENGTH * 0.7))
    CRITICAL_MAX = min(80, int(MAX_LENGTH * 1.3))

    weight = 0.10

    @property
    def id(self) -> str:
        return "title_length"

    @property
    def label(self) -> str:
        return "Title length"

    @property
    def description(self) -> str:
        return "Checks whether the document title length is within the recommended range."

    def run(self, context: Context) -> Result:
        title = context.title()
        length = len(title)
        keyword = context.focus_keyword.strip()
        has_keyword = context.has_focus_keyword() and contains_keyword(title, keyword)

        details = {
            "length": length,
            "recommended_min": self.MIN_LENGTH,
            "recommended_max": self.MAX_LENGTH,
            "has_keyword": has_keyword,
            "focus_keyword": keyword,
        }

        if length == 0:
            message = f"Title is missing. Add an SEO title of at least {self.MIN_LENGTH} characters."
            if keyword:
                message = (
                    f"Title is missing. Add at least {self.MIN_LENGTH} characters "
                    f'including the keyword "{keyword}".'
                )
            return self.result(Status.FAIL, details, message)

        status = Status.PASS
        message = (
            f"Title length is {length} characters "
            f"(recommended {self.MIN_LENGTH}-{self.MAX_LENGTH})."
        )
        if keyword and not has_keyword:
            status = Status.WARN
            message = f'Title length is fine ({length} characters) but the keyword "{keyword}" is missing.'

        if length < self.MIN_LENGTH:
            status = Status.WARN
            message = (
                f"Title is short: {length} characters. Add {self.MIN_LENGTH - length} more "
                f"(minimum {self.MIN_LENGTH})."
            )
        elif length > self.MAX_LENGTH:
            status = Status.WARN
            message = (
                f"Title is long: {length} characters. Remove {length - self.MAX_LENGTH} "
                f"(maximum {self.MAX_LENGTH})."
            )

        if length < self.CRITICAL_MIN:
            status = Status.FAIL
            message = (
                f"Title is far too short: {length} characters. "
                f"Add at least {self.CRITICAL_MIN - length} more."
            )
        elif length > self.CRITICAL_MAX:
            status = Status.FAIL
            message = (
                f"Title is far too long: {length} characters. "
                f"Remove at least {length - self.CRITICAL_MAX}."
            )

        out_of_range = not self.MIN_LENGTH <= length <= self.MAX_LENGTH
        if out_of_range and keyword and not has_keyword:
            message += f' Include the keyword "{keyword}".'

        return self.result(status, details, message)


class MetaDescriptionCheck(CheckInterface):
    """Meta description present, 120-160 characters, mentioning the focus keyword."""

    MIN_LENGTH = 120
    MAX_LENGTH = 160

    weight = 0.10

    @property
    def id(self) -> str:
        return "meta_description"

    @property
    def label(self) -> str:
        return "Meta description"

    @property
    def description(self) -> str:
        return "Checks whether a meta description exists and fits within the recommended range."

    def run(self, context: Context) -> Result:
        description = context.meta_description()
        length = len(description)
        keyword = context.focus_keyword.strip()
        has_keyword = context.has_focus_keyword() and contains_keyword_words(description, keyword)

        details = {
            "length": length,
            "recommended_min": self.MIN_LENGTH,
            "recommended_max": self.MAX_LENGTH,
            "has_keyword": has_keyword,
            "focus_keyword": keyword,
        }

        if length == 0:
            message = f"Meta description is missing. Add at least {self.MIN_LENGTH} characters."
            if keyword:
                message = (
                    f"Meta description is missing. Add at least {self.MIN_LENGTH} characters "
                    f'including "{keyword}".'
                )
            return self.result(Status.FAIL, details, message)

        status = Status.PASS
        message = (
            f"Meta description length is {length} characters "
            f"(recommended {self.MIN_LENGTH}-{self.MAX_LENGTH})."
        )
        if keyword and not has_keyword:
            status = Status.WARN
            message = f'Meta description length is fine ({length} characters) but "{keyword}" is missing.'

        if length < self.MIN_LENGTH:
            status = Status.WARN
            message = (
                f"Meta description is short: {length} characters. "
                f"Add {self.MIN_LENGTH - length} more (minimum {self.MIN_LENGTH})."
            )
        elif length > self.MAX_LENGTH:
            status = Status.WARN
            message = (
                f"Meta description is long: {length} characters. "
                f"Remove {length - self.MAX_LENGTH} (maximum {self.MAX_LENGTH})."
            )

        out_of_range = not self.MIN_LENGTH <= length <= self.MAX_LENGTH
        if out_of_range and keyword and not has_keyword:
            message += f' Include "{keyword}".'

        return self.result(status, details, message)


class CanonicalCheck(CheckInterface):
    weight = 0.10

    @property
    def id(self) -> str:
        return "canonical"

    @property
    def label(self) -> str:
        return "Canonical URL"

    @property
    def description(self) -> str:
        return "Checks if a canonical URL is defined and valid."

    def run(self, context: Context) -> Result:
        canonical = (context.canonical() or "").strip()

        if not canonical:
            return self.result(
                Status.FAIL,
                {"canonical": ""},
                "Set a canonical URL to avoid duplicate content issues.",
            )

        if not is_absolute_url(canonical):
            return self.result(
                Status.FAIL,
                {"canonical": canonical},
                "Canonical URL must be an absolute, valid URL.",
            )

        return self.result(Status.PASS, {"canonical": canonical}, "Canonical tag looks valid.")


class RobotsIndexabilityCheck(CheckInterface):
    weight = 0.10

    @property
    def id(self) -> str:
        return "robots_indexability"

    @property
    def label(self) -> str:
        return "Robots directives"

    @property
    def description(self) -> str:
        return "Ensures robots directives allow search engines to index the page."

    def run(self, context: Context) -> Result:
        directive = (context.robots() or "").strip().lower()

        if not directive:
            return self.result(
                Status.WARN,
                {"directive": "", "tokens": []},
                "No robots meta tag found. Ensure indexable pages are accessible.",
            )

        tokens = [token.strip() for token in directive.split(",") if token.strip()]
        details = {"directive": directive, "tokens": tokens}

        if "noindex" in tokens:
            return self.result(
                Status.FAIL,
                details,
                "Remove the noindex directive to allow search engines to index this page.",
            )

        if "nofollow" in tokens:
            return self.result(
                Status.WARN,
                details,
                "Consider removing nofollow to let link equity flow from this page.",
            )

        return self.result(Status.PASS, details, "Robots directives allow indexing.")


def is_absolute_url(value: str) -> bool:
    """True for an absolute http(s) URL with a host and no whitespace."""
    if any(ch.isspace() for ch in value):
        return False

    try:
        parsed = urlparse(value)
    except ValueError:
        return False

    if parsed.scheme in ("http", "https"):
        return bool(parsed.hostname)
    return False
