"""Fetch reference rows, fold them into a prompt and hand it to Gemini.

The three steps run strictly in order within one call; nothing is cached or
retried and nothing is kept between calls.
"""

import logging

from .config import Settings
from .gemini_client import generate_content
from .models import AiResponse
from .prompt import build_prompt
from .supabase_client import fetch_records

logger = logging.getLogger(__name__)


def relay_query(user_prompt: str, settings: Settings) -> AiResponse:
    records = fetch_records(settings)
    prompt = build_prompt(records, user_prompt)
    logger.debug("Built prompt with %d records (%d chars)", len(records), len(prompt))
    return generate_content(prompt, settings)
