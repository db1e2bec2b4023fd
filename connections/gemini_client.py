import logging
from typing import Any

import requests

from .config import Settings
from .errors import UpstreamFailure
from .logging_config import log_latency
from .models import AiResponse

logger = logging.getLogger(__name__)


def extract_text(resp_json: AiResponse) -> str:
    # Gemini REST v1beta response shape: candidates[0].content.parts[].text
    cands = resp_json.get("candidates") or []
    if not cands:
        return ""
    parts = (cands[0].get("content") or {}).get("parts") or []
    texts = [p.get("text", "") for p in parts if p.get("text")]
    return "\n".join(texts).strip()


def _error_message(error_data: Any) -> str:
    if isinstance(error_data, dict):
        err = error_data.get("error")
        if isinstance(err, dict) and err.get("message"):
            return err["message"]
    return "Unknown error"


@log_latency("gemini.generate_content")
def generate_content(prompt: str, settings: Settings) -> AiResponse:
    headers = {"Content-Type": "application/json"}
    body = {"contents": [{"parts": [{"text": prompt}]}]}
    try:
        resp = requests.post(
            settings.GEMINI_URL,
            params={"key": settings.GOOGLE_API_KEY},
            headers=headers,
            json=body,
            timeout=settings.RELAY_TIMEOUT_SECONDS,
        )
    except requests.RequestException as e:
        # The message embeds the request URL, and with it the ?key= query
        logger.error("Gemini request failed: %s", type(e).__name__)
        raise UpstreamFailure("gemini", type(e).__name__) from None

    if not resp.ok:
        try:
            error_data = resp.json()
        except ValueError:
            error_data = {"error": {"message": resp.text}} if resp.text else {}
        logger.error("Gemini AI API error (status=%s): %s", resp.status_code, error_data)
        raise UpstreamFailure(
            "gemini",
            _error_message(error_data),
            status=resp.status_code,
            payload=error_data,
        )

    return resp.json()
