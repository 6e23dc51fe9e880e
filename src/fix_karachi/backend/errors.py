"""
fix_karachi.backend.errors

Exceptions raised by backend clients for explicit user actions (sign-in, sign-up).

Lookups never raise these; they return `ProviderError` results instead
(see `fix_karachi.backend.results`).
"""

from __future__ import annotations


class BackendError(Exception):
    pass


class AuthenticationError(BackendError):
    """
    Bad credentials or sign-up conflict.

    `message` is the provider's own text and is shown to the user verbatim.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ProviderUnavailableError(BackendError):
    # Network failure or unexpected provider response.
    pass
