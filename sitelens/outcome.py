"""Outcome — what an adapter call produced, before any fallback is applied."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Success:
    text: str


@dataclass(frozen=True)
class Empty:
    """The call completed (or was skipped) without producing any text."""


@dataclass(frozen=True)
class Failure:
    reason: str


Outcome = Success | Empty | Failure


def resolve(outcome: Outcome, *, empty: str, failure: str) -> str:
    """Map an outcome to the caller-facing string."""
    match outcome:
        case Success(text=text):
            return text
        case Empty():
            return empty
        case Failure():
            return failure
        case _:
            raise TypeError(f"not an Outcome: {outcome!r}")
