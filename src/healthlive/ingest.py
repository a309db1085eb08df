"""Ingest acceptance: bearer-token check and stored-record construction.

An export POST carries a JSON body with ``metrics`` and/or ``workouts``.
The body is stored as-is next to a server-assigned ingestion timestamp;
nothing is validated or transformed beyond that.
"""

from __future__ import annotations

import hmac
from datetime import datetime, timezone
from typing import Any, Mapping

BEARER_PREFIX = "Bearer "


class IngestError(Exception):
    """Base class for rejected ingest requests."""

    status = 400


class Unauthorized(IngestError):
    """Missing or wrong bearer token."""

    status = 401


class InvalidPayload(IngestError):
    """Body has neither metrics nor workouts."""

    status = 400


def check_bearer(header: str | None, secret: str | None) -> None:
    """Raise Unauthorized unless *header* is ``Bearer <secret>``.

    An unset or empty secret rejects every request.
    """
    header = header or ""
    token = header[len(BEARER_PREFIX):] if header.startswith(BEARER_PREFIX) else None
    if not token or not secret:
        raise Unauthorized("Unauthorized")
    if not hmac.compare_digest(token.encode("utf-8"), secret.encode("utf-8")):
        raise Unauthorized("Unauthorized")


def build_ingest_record(
    body: Mapping[str, Any] | None,
    now: datetime | None = None,
) -> dict[str, Any]:
    """Build the record to store for an accepted export body.

    Args:
        body: Parsed JSON body.
        now: Ingestion time (default: current UTC time).

    Returns:
        ``{"ingest_date", "metrics", "workouts", "payload"}`` where
        ``payload`` holds any other top-level keys (``{}`` when there are none).

    Raises:
        InvalidPayload: If the body has neither ``metrics`` nor ``workouts``.
    """
    if not isinstance(body, Mapping):
        body = {}
    metrics = body.get("metrics")
    workouts = body.get("workouts")
    if not metrics and not workouts:
        raise InvalidPayload("Request body must include metrics or workouts")

    rest = {k: v for k, v in body.items() if k not in ("metrics", "workouts")}
    now = now or datetime.now(timezone.utc)

    return {
        "ingest_date": now.isoformat(),
        "metrics": metrics or None,
        "workouts": workouts or None,
        "payload": rest,
    }
