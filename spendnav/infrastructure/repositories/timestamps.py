# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime


def as_utc(value: datetime | None) -> datetime | None:
    """Normalise to an aware UTC datetime; naive values are taken as UTC.

    SQLite drops tzinfo on the way back, and storing everything in UTC keeps
    ``ORDER BY date`` chronological on every engine.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
