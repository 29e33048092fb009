"""Lumen scoring package."""

from scoring.engine import ScoreEngine

__all__ = ["ScoreEngine"]
