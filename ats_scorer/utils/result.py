"""
Success/failure values for scoring components that fail open.

A component returning ``Result[T]`` never raises; the caller decides the
default at the boundary with ``unwrap_or``.
"""
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from ats_scorer.utils.exceptions import AnalysisError
from ats_scorer.utils.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[AnalysisError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: AnalysisError) -> "Result[T]":
        return cls(error=error)

    @classmethod
    def capture(cls, component: str, func: Callable[..., T], *args, **kwargs) -> "Result[T]":
        """Run func and turn any exception into a failed Result"""
        try:
            return cls.success(func(*args, **kwargs))
        except AnalysisError as e:
            return cls.failure(e)
        except Exception as e:
            return cls.failure(AnalysisError(f"{component} failed: {e}", component=component, cause=e))

    def unwrap_or(self, default: T) -> T:
        if self.ok:
            return self.value
        logger.warning(f"Falling back to default: {self.error.message}", extra={"details": self.error.details})
        return default
