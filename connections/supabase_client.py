import logging
from typing import Any, List

import requests

from .config import Settings
from .errors import UpstreamFailure
from .logging_config import log_latency
from .models import ReferenceRecord

logger = logging.getLogger(__name__)

SELECT_COLUMNS = "id,name,university,tags,linkedin"


def _error_body(resp: requests.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return {"message": resp.text}


def _records_url(settings: Settings) -> str:
    base = settings.SUPABASE_URL.rstrip("/")
    return f"{base}/rest/v1/{settings.SUPABASE_TABLE_NAME}"


@log_latency("supabase.fetch_records")
def fetch_records(settings: Settings) -> List[ReferenceRecord]:
    headers = {"apikey": settings.SUPABASE_KEY, "Content-Type": "application/json"}
    try:
        resp = requests.get(
            _records_url(settings),
            headers=headers,
            params={"select": SELECT_COLUMNS},
            timeout=settings.RELAY_TIMEOUT_SECONDS,
        )
    except requests.RequestException as e:
        # The message names the Supabase host, which is configured as a secret
        logger.error("Supabase request failed: %s", type(e).__name__)
        raise UpstreamFailure("supabase", type(e).__name__) from None

    if not resp.ok:
        error_data = _error_body(resp)
        logger.error("Supabase fetch error (status=%s): %s", resp.status_code, error_data)
        message = error_data.get("message") if isinstance(error_data, dict) else None
        raise UpstreamFailure(
            "supabase",
            message or "Unknown error",
            status=resp.status_code,
            payload=error_data,
        )

    rows = resp.json()
    if not isinstance(rows, list):
        logger.error("Supabase returned a non-array body: %s", rows)
        raise UpstreamFailure("supabase", "Expected a JSON array of rows", status=resp.status_code, payload=rows)

    records = [ReferenceRecord.model_validate(row) for row in rows]
    logger.info("Fetched %d records from %s", len(records), settings.SUPABASE_TABLE_NAME)
    return records
