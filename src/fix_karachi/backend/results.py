"""
fix_karachi.backend.results

Typed outcomes for provider lookups.

Responsibilities:
- Distinguish "found", "not there" and "could not ask" so callers handle each
  explicitly instead of probing untyped response objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class NotFound:
    pass


@dataclass(frozen=True, slots=True)
class ProviderError:
    detail: str


Result = Ok[T] | NotFound | ProviderError

NOT_FOUND = NotFound()


# --- Module Notes -----------------------------------------------------------
# Callers dispatch with `match`:
#     match await backend.query_role(pid):
#         case Ok(value=assignment): ...
#         case NotFound(): ...
#         case ProviderError(detail=detail): ...
