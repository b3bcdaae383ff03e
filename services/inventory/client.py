from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union

import httpx
from pydantic import ValidationError

from core.config import Settings, settings as default_settings
from domain.models import ApiResponse

logger = logging.getLogger(__name__)


class InventoryFetchError(Exception):
    kind = "unknown"


class ConnectivityError(InventoryFetchError):
    kind = "connectivity"

    def __init__(self, base_url: str):
        self.base_url = base_url
        super().__init__(
            f"Cannot connect to API server. Please ensure the server is running at {base_url}"
        )


class APIStatusError(InventoryFetchError):
    kind = "http"

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API request failed with status {status_code}: {body}")


class InvalidFormatError(InventoryFetchError):
    kind = "format"

    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__("Invalid data format received from API")


class RequestFailedError(InventoryFetchError):
    kind = "request"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Request to API server failed: {detail}")


class FetchStatus(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class Loading:
    status: FetchStatus = FetchStatus.LOADING


@dataclass(frozen=True)
class Loaded:
    payload: ApiResponse
    status: FetchStatus = FetchStatus.LOADED


@dataclass(frozen=True)
class Failed:
    kind: str
    message: str
    status: FetchStatus = FetchStatus.FAILED


FetchState = Union[Loading, Loaded, Failed]


def _parse_payload(response: httpx.Response) -> ApiResponse:
    try:
        data = response.json()
    except ValueError as e:
        raise InvalidFormatError(f"body is not JSON: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("installed_apps"), list):
        raise InvalidFormatError("installed_apps missing or not a list")

    try:
        return ApiResponse.model_validate(data)
    except ValidationError as e:
        raise InvalidFormatError(str(e)) from e


def fetch_latest_data(
    settings: Settings | None = None, client: httpx.Client | None = None
) -> ApiResponse:
    """GET /api/latest_data once; no retry, no cache."""
    cfg = settings or default_settings
    url = cfg.latest_data_url
    logger.debug("fetching inventory snapshot from %s", url)

    try:
        if client is not None:
            r = client.get(url)
        else:
            with httpx.Client(timeout=cfg.INVENTORY_API_TIMEOUT_S) as c:
                r = c.get(url)
    except httpx.DecodingError as e:
        raise InvalidFormatError(f"undecodable body: {e}") from e
    except httpx.TransportError as e:
        raise ConnectivityError(cfg.INVENTORY_API_URL) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise RequestFailedError(str(e)) from e

    if not r.is_success:
        raise APIStatusError(r.status_code, r.text)

    return _parse_payload(r)


def load_dashboard_state(
    settings: Settings | None = None, client: httpx.Client | None = None
) -> FetchState:
    """Run the single fetch and fold its outcome into Loaded or Failed."""
    try:
        payload = fetch_latest_data(settings=settings, client=client)
    except InventoryFetchError as e:
        logger.warning("inventory fetch failed (%s): %s", e.kind, e)
        return Failed(kind=e.kind, message=str(e))

    logger.info(
        "loaded inventory: os=%s osquery=%s apps=%d",
        payload.os_version.name,
        payload.osquery_version,
        len(payload.installed_apps),
    )
    return Loaded(payload=payload)
