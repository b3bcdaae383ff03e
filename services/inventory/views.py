from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable

from domain.models import InstalledApp

NOT_AVAILABLE = "N/A"
RECENT_LIMIT = 10
INVALID_DATE = "Invalid Date"


def format_date(timestamp: float | None) -> str:
    """Unix seconds -> local date-time string; 0/None -> "N/A"."""
    if not timestamp:
        return NOT_AVAILABLE
    try:
        return datetime.fromtimestamp(timestamp).strftime("%c")
    except (ValueError, OverflowError, OSError):
        return INVALID_DATE


def display_name(app: InstalledApp) -> str:
    return app.display_name or app.bundle_name or app.name


def version_label(app: InstalledApp) -> str:
    return app.bundle_short_version or NOT_AVAILABLE


def recent_apps(apps: Iterable[InstalledApp], limit: int = RECENT_LIMIT) -> list[InstalledApp]:
    return sorted(apps, key=lambda a: a.last_opened_time or 0, reverse=True)[:limit]


def deleted_apps(apps: Iterable[InstalledApp]) -> list[InstalledApp]:
    gone = [a for a in apps if a.is_deleted]
    return sorted(gone, key=lambda a: a.end_time or 0, reverse=True)


def has_recent_activity(apps: Iterable[InstalledApp]) -> bool:
    return any(a.last_opened_time for a in apps)


# --- table rows ---


def _base_row(app: InstalledApp) -> dict[str, Any]:
    return {
        "Name": display_name(app),
        "Bundle ID": app.bundle_identifier,
        "Version": version_label(app),
    }


def all_rows(apps: Iterable[InstalledApp]) -> list[dict[str, Any]]:
    return [
        {**_base_row(a), "Path": a.path, "Last Opened": format_date(a.last_opened_time)}
        for a in apps
    ]


def recent_rows(apps: Iterable[InstalledApp]) -> list[dict[str, Any]]:
    return [
        {**_base_row(a), "Last Opened": format_date(a.last_opened_time)}
        for a in recent_apps(apps)
    ]


def deleted_rows(apps: Iterable[InstalledApp]) -> list[dict[str, Any]]:
    return [
        {
            **_base_row(a),
            "Last Opened": format_date(a.last_opened_time),
            "Deleted At": format_date(a.end_time),
        }
        for a in deleted_apps(apps)
    ]
