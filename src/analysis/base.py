"""Base check interface."""

from abc import ABC, abstractmethod

from analysis.context import Context
from analysis.result import Result


class CheckInterface(ABC):
    """Abstract base class for all checks.

    A check is stateless and side-effect free: its verdict depends only on
    the Context it is given, so one instance can serve many documents,
    including concurrently.
    """

    # Contribution toward the composite score (0..1)
    weight: float = 0.0

    @property
    @abstractmethod
    def id(self) -> str:
        """Unique lowercase identifier."""
        pass

    @property
    @abstractmethod
    def label(self) -> str:
        """Human readable name."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """What the check validates."""
        pass

    @abstractmethod
    def run(self, context: Context) -> Result:
        """
        Evaluate the check against a document.

        Args:
            context: The document under analysis

        Returns:
            Result with status, details and a fix hint
        """
        pass

    def result(self, status, details: dict, message: str) -> Result:
        """Build a Result carrying this check's weight."""
        return Result(status=status, details=details, message=message, weight=self.weight)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"
