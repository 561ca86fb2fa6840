"""Result types for railway-oriented construction.

Fallible construction steps (settings validation, matcher signature
compilation, detector assembly) return a Result instead of raising, so the
composition root decides whether a failure is fatal.

Usage:
    match DeviceDetector.create(settings):
        case Success(value=detector):
            detector.detect(user_agent)
        case Failure(error=error):
            logger.error("Detector unavailable", reason=error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: The error describing what went wrong.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
