from __future__ import annotations

import logging
from typing import Dict, List, NamedTuple, Optional, Tuple
from urllib.parse import quote

import requests
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from futures_core.config import DEFAULT_HTTP_TIMEOUT
from futures_core.loaders.records import parse_records
from futures_core.pipeline.errors import FetchError, SchemaValidationError
from futures_core.pipeline.model import Record

logger = logging.getLogger(__name__)

MANIFEST_NAME = "dimensions.json"


class DimensionDatum(NamedTuple):
    """One row of a pre-partitioned (Scenario, Region) file."""
    variable: str
    year: int
    value: float


class DimensionsManifest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    scenarios: List[str] = Field(default_factory=list, alias="Scenarios")
    regions: List[str] = Field(default_factory=list, alias="Regions")


_DIMENSION_DATA = TypeAdapter(List[DimensionDatum])


def _get(url: str, timeout: float, headers: Optional[Dict[str, str]] = None) -> requests.Response:
    logger.debug("GET %s", url)
    try:
        r = requests.get(url, timeout=timeout, headers=headers)
        r.raise_for_status()
    except requests.HTTPError as exc:
        status = getattr(exc.response, "status_code", None)
        logger.warning("fetch failed for %s (status %s)", url, status)
        raise FetchError(url, str(exc), status_code=status) from exc
    except requests.RequestException as exc:
        logger.warning("fetch failed for %s: %s", url, exc)
        raise FetchError(url, str(exc)) from exc
    return r


def fetch_text(url: str, timeout: float = DEFAULT_HTTP_TIMEOUT) -> str:
    """GET url and return the body. Network errors and non-2xx responses raise FetchError."""
    return _get(url, timeout).text


def _fetch_json(url: str, timeout: float):
    r = _get(url, timeout, headers={"Accept": "application/json"})
    try:
        return r.json()
    except ValueError as exc:
        raise SchemaValidationError(f"{url} did not return valid JSON") from exc


def load_remote_records(url: str, timeout: float = DEFAULT_HTTP_TIMEOUT) -> List[Record]:
    records = parse_records(fetch_text(url, timeout=timeout))
    logger.info("loaded %d records from %s", len(records), url)
    return records


def fetch_dimensions(base_url: str, timeout: float = DEFAULT_HTTP_TIMEOUT) -> DimensionsManifest:
    """Fetch and validate {base_url}/dimensions.json."""
    url = f"{base_url.rstrip('/')}/{MANIFEST_NAME}"
    payload = _fetch_json(url, timeout)
    try:
        return DimensionsManifest.model_validate(payload)
    except ValidationError as exc:
        raise SchemaValidationError(f"{url}: {exc.error_count()} invalid field(s) in manifest") from exc


class DimensionDataClient:
    """
    Fetches per-(scenario, region) rows on demand and memoizes them for the
    lifetime of the client. The cache key is the (scenario, region) tuple;
    nothing is evicted and failed fetches are not stored.
    """

    def __init__(self, base_url: str, *, timeout: float = DEFAULT_HTTP_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._cache: Dict[Tuple[str, str], List[DimensionDatum]] = {}

    def url_for(self, scenario: str, region: str) -> str:
        return f"{self.base_url}/{quote(scenario, safe='')}/{quote(region, safe='')}.json"

    def is_cached(self, scenario: str, region: str) -> bool:
        return (scenario, region) in self._cache

    def get(self, scenario: Optional[str], region: Optional[str]) -> Optional[List[DimensionDatum]]:
        """Rows for the selection, or None while either option is still unselected."""
        if not scenario or not region:
            return None

        key = (scenario, region)
        if key in self._cache:
            logger.debug("cache hit for %s", key)
            return self._cache[key]

        url = self.url_for(scenario, region)
        payload = _fetch_json(url, self.timeout)
        try:
            rows = _DIMENSION_DATA.validate_python(payload)
        except ValidationError as exc:
            raise SchemaValidationError(f"{url}: {exc.error_count()} invalid row(s)") from exc

        self._cache[key] = rows
        return rows
