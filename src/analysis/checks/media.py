"""Image checks."""

from analysis.base import CheckInterface
from analysis.context import Context
from analysis.result import Result, Status


class ImageAltCheck(CheckInterface):
    """Share of images with a non-empty alt attribute."""

    PASS_COVERAGE = 80
    FAIL_COVERAGE = 50

    weight = 0.08

    @property
    def id(self) -> str:
        return "image_alt"

    @property
    def label(self) -> str:
        return "Image alt text"

    @property
    def description(self) -> str:
        return "Ensures images include descriptive alt text for accessibility and SEO."

    def run(self, context: Context) -> Result:
        images = context.images()
        total = len(images)

        if total == 0:
            return self.result(
                Status.WARN,
                {"coverage": 0, "total": 0, "with_alt": 0, "missing_alt_samples": []},
                "No images found. Consider adding images with descriptive alt text.",
            )

        missing_samples = []
        with_alt = 0
        for image in images:
            if (image.get("alt") or "").strip():
                with_alt += 1
            else:
                missing_samples.append((image.get("src") or "unknown")[:100])

        missing = total - with_alt
        coverage = round(with_alt / total * 100)
        details = {
            "coverage": coverage,
            "total": total,
            "with_alt": with_alt,
            "missing_alt_samples": missing_samples[:5],
        }

        if coverage < self.FAIL_COVERAGE:
            return self.result(
                Status.FAIL,
                details,
                f"Only {coverage}% of images have alt text. Add alt text to {missing} "
                f"of {total} images (aim for {self.PASS_COVERAGE}%+).",
            )

        if coverage < self.PASS_COVERAGE:
            return self.result(
                Status.WARN,
                details,
                f"{missing} of {total} images are missing alt text ({coverage}% covered). "
                f"Add them to reach {self.PASS_COVERAGE}%+.",
            )

        return self.result(
            Status.PASS,
            details,
            f"{with_alt}/{total} images have alt text ({coverage}%).",
        )
