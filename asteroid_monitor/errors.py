"""Error taxonomy for the Asteroid Monitor data pipeline.

Every feed error is recoverable: a failing tier hands over to the next one and
the emergency tier cannot fail. Record-level problems only drop the record.

Updates: v0.1 - 2026-10-12 - Introduced tier and record error classes.
"""

from __future__ import annotations


class AsteroidMonitorError(Exception):
    """Base class for application errors."""


class FeedError(AsteroidMonitorError):
    """A data tier could not produce a usable payload."""

    kind = "feed_error"


class NetworkFailure(FeedError):
    """Connection problem or non-2xx response."""

    kind = "network_failure"


class FeedTimeout(FeedError):
    """The tier's time budget was exceeded."""

    kind = "timeout"


class MalformedPayload(FeedError):
    """Response parsed but lacks the expected mapping (or is empty)."""

    kind = "malformed_payload"


class FieldParseFailure(AsteroidMonitorError, ValueError):
    """A feed entry is missing a required field or holds an unparsable number."""


class CommentValidationError(AsteroidMonitorError, ValueError):
    """User supplied comment input was rejected."""


__all__ = [
    "AsteroidMonitorError",
    "FeedError",
    "NetworkFailure",
    "FeedTimeout",
    "MalformedPayload",
    "FieldParseFailure",
    "CommentValidationError",
]
