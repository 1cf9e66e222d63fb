from __future__ import annotations


class LayoutParseError(ValueError):
    """A board layout could not be parsed. The caller should reject the input."""


class BoardConsistencyError(RuntimeError):
    """
    The board reached a state that the rules do not allow.

    Raised for a missing camel, a bump that resolves onto another bump, or an
    unknown space kind. Never retried: the computation is aborted.
    """
