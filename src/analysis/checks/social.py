"""Social card checks (Open Graph and Twitter)."""

from analysis.base import CheckInterface
from analysis.context import Context
from analysis.result import Result, Status


class _SocialTagsCheck(CheckInterface):
    """
    Shared logic for checks that require a fixed set of meta tags.

    Subclasses declare the meta attribute to match on, the required tags
    in display order, fallback tags that satisfy a requirement, and how
    many missing tags turn a warning into a failure.
    """

    attribute: str = "property"
    required: tuple[str, ...] = ()
    fallbacks: dict[str, str] = {}
    fail_threshold: int = 1
    network: str = ""

    def run(self, context: Context) -> Result:
        present = {}
        missing = []

        for tag in self.required:
            value = context.meta_content(self.attribute, tag)
            if not value and tag in self.fallbacks:
                value = context.meta_content(self.attribute, self.fallbacks[tag])
            if value:
                present[tag] = value
            else:
                missing.append(tag)

        if not missing:
            return self.result(
                Status.PASS,
                {"tags": present, "missing": []},
                f"All {len(self.required)} required {self.network} tags are present.",
            )

        missing_list = ", ".join(missing)
        details = {"tags": present, "missing": missing}

        if len(missing) >= self.fail_threshold:
            return self.result(
                Status.FAIL,
                details,
                f"{len(missing)} {self.network} tags are missing: {missing_list}.",
            )

        return self.result(
            Status.WARN,
            details,
            f"Missing {self.network} tags: {missing_list}. Add them to complete the card.",
        )


class OgCardsCheck(_SocialTagsCheck):
    attribute = "property"
    required = ("og:title", "og:description", "og:type", "og:url", "og:image")
    fallbacks = {"og:image": "og:image:secure_url"}
    fail_threshold = 3  # more than two missing
    network = "Open Graph"

    weight = 0.08

    @property
    def id(self) -> str:
        return "og_cards"

    @property
    def label(self) -> str:
        return "Open Graph tags"

    @property
    def description(self) -> str:
        return "Checks presence of essential Open Graph tags."


class TwitterCardsCheck(_SocialTagsCheck):
    attribute = "name"
    required = ("twitter:card", "twitter:title", "twitter:description", "twitter:image")
    fallbacks = {"twitter:image": "twitter:image:src"}
    fail_threshold = 2
    network = "Twitter card"

    weight = 0.06

    @property
    def id(self) -> str:
        return "twitter_cards"

    @property
    def label(self) -> str:
        return "Twitter cards"

    @property
    def description(self) -> str:
        return "Checks presence of essential Twitter card tags."
