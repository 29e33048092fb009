"""Heading checks."""

from analysis.base import CheckInterface
from analysis.context import Context
from analysis.result import Result, Status
from analysis.text import contains_keyword


class H1PresenceCheck(CheckInterface):
    """Exactly one non-empty H1, containing the focus keyword when one is set."""

    weight = 0.08

    @property
    def id(self) -> str:
        return "h1_presence"

    @property
    def label(self) -> str:
        return "H1 heading"

    @property
    def description(self) -> str:
        return "Checks that a single H1 heading exists for the document."

    def run(self, context: Context) -> Result:
        if context.dom() is None:
            return self.result(
                Status.WARN,
                {"count": 0},
                "Provide HTML content with an H1 heading for analysis.",
            )

        h1_texts = [heading.text for heading in context.ordered_headings() if heading.level == 1]
        count = len(h1_texts)

        if count == 0:
            return self.result(
                Status.FAIL,
                {"count": 0},
                "Add a descriptive H1 heading to introduce the page content.",
            )

        if count > 1:
            excess = count - 1
            return self.result(
                Status.WARN,
                {"count": count, "excess": excess, "values": h1_texts[:5]},
                f"Found {count} H1 headings. Demote {excess} of them so the page "
                f"has a single H1.",
            )

        keyword = context.focus_keyword.strip()
        details = {"count": 1, "values": h1_texts}

        if keyword:
            has_keyword = contains_keyword(h1_texts[0], keyword)
            details["has_keyword"] = has_keyword
            if not has_keyword:
                return self.result(
                    Status.WARN,
                    details,
                    f'The H1 heading does not mention the keyword "{keyword}".',
                )

        return self.result(Status.PASS, details, "Exactly one H1 heading was detected.")


class HeadingsStructureCheck(CheckInterface):
    """Headings must not skip levels on the way down (H2 -> H4 is a jump)."""

    weight = 0.08

    @property
    def id(self) -> str:
        return "headings_structure"

    @property
    def label(self) -> str:
        return "Heading structure"

    @property
    def description(self) -> str:
        return "Ensures headings progress logically without skipping levels."

    def run(self, context: Context) -> Result:
        headings = context.ordered_headings()

        if not headings:
            return self.result(
                Status.WARN,
                {"issues": [], "violations": 0},
                "Add structured headings (H2-H6) to organize your content.",
            )

        issues = []
        previous = max(1, headings[0].level)
        for heading in headings:
            if heading.level > previous + 1:
                issues.append(f'Heading "{heading.text}" jumps from H{previous} to H{heading.level}.')
            previous = heading.level

        details = {"issues": issues, "violations": len(issues)}

        if not issues:
            return self.result(Status.PASS, details, "Heading levels flow correctly.")

        if len(issues) > 1:
            return self.result(
                Status.FAIL,
                details,
                "Reorder headings so they increase one level at a time.",
            )

        return self.result(Status.WARN, details, "Minor heading hierarchy adjustments recommended.")
