"""Score engine that folds weighted check verdicts into a 0-100 score."""

import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)


class ScoreEngine:
    """
    Turns an analysis' check entries into a composite score.

    Each check contributes its own weight (0..1) times a configured
    multiplier (0..10, default 1.0). A pass earns the full contribution,
    a warning half of it and a failure nothing.
    """

    STATUS_MULTIPLIERS = {
        "pass": 1.0,
        "warn": 0.5,
        "fail": 0.0,
    }

    # Minimum score for each traffic-light colour, highest first
    COLOR_THRESHOLDS = (
        (80, "green"),
        (60, "yellow"),
        (0, "red"),
    )

    DEFAULT_HINT = "Review this area to resolve outstanding warnings."

    def __init__(self, weights: Mapping[str, Any] | None = None):
        """Initialize with per-check weight multipliers keyed by check id."""
        self.weights = self._normalize_weights(weights or {})

    def calculate(self, checks: Mapping[str, Any]) -> dict:
        """
        Calculate the composite score for a set of check entries.

        Args:
            checks: Check entries keyed by id, as produced by Analyzer.analyze

        Returns:
            Dict with score, colour status, recommendations, per-check
            breakdown and the weight totals
        """
        weight_total = 0.0
        weighted_achieved = 0.0
        breakdown = {}
        recommendations = []

        for check_id, check in checks.items():
            check_id = str(check_id)
            if not check_id or not isinstance(check, Mapping):
                continue

            base_weight = self._clamp(check.get("weight"), 0.0, 1.0, 0.0)
            applied_weight = base_weight * self.weights.get(check_id, 1.0)
            weight_total += applied_weight

            status = check.get("status")
            if not isinstance(status, str):
                status = "warn"
            multiplier = self.STATUS_MULTIPLIERS.get(status, 0.0)
            contribution = applied_weight * multiplier
            weighted_achieved += contribution

            breakdown[check_id] = {
                "id": check_id,
                "status": status,
                "weight": applied_weight,
                "multiplier": multiplier,
                "contribution": contribution,
            }

            if status in ("warn", "fail"):
                recommendations.append(self._recommendation(check_id, check))

        score = 0
        if weight_total > 0:
            score = round(max(0.0, min(1.0, weighted_achieved / weight_total)) * 100)

        logger.debug(f"Score {score} from {len(breakdown)} checks (weight total {weight_total:.2f})")

        return {
            "score": score,
            "status": self.color_from_score(score),
            "recommendations": recommendations,
            "breakdown": breakdown,
            "weight_total": weight_total,
            "weighted_achieved": weighted_achieved,
        }

    def color_from_score(self, score: int) -> str:
        for threshold, color in self.COLOR_THRESHOLDS:
            if score >= threshold:
                return color
        return "red"

    def _recommendation(self, check_id: str, check: Mapping[str, Any]) -> str:
        label = check.get("label")
        label = label.strip() if isinstance(label, str) else ""
        hint = check.get("fix_hint")
        hint = hint.strip() if isinstance(hint, str) else ""

        return f"{label or check_id}: {hint or self.DEFAULT_HINT}"

    def _normalize_weights(self, weights: Mapping[str, Any]) -> dict[str, float]:
        normalized = {}
        for key, value in weights.items():
            if not isinstance(key, str):
                logger.warning(f"Ignoring scoring weight with non-string key {key!r}")
                continue
            normalized[key] = self._clamp(value, 0.0, 10.0, 1.0)
        return normalized

    @staticmethod
    def _clamp(value: Any, low: float, high: float, fallback: float) -> float:
        """Coerce `value` to a float in [low, high], or `fallback` if not numeric."""
        if isinstance(value, bool) or value is None:
            return fallback
        try:
            number = float(value)
        except (TypeError, ValueError):
            return fallback
        if number != number:  # NaN
            return fallback
        return min(high, max(low, number))
