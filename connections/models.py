from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

# Gemini's payload is relayed untouched, so it stays an untyped JSON object
AiResponse = Dict[str, Any]


class ReferenceRecord(BaseModel):
    """One row of the Supabase users table."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[Any] = None
    name: Optional[Any] = None
    affiliation: Optional[Any] = Field(default=None, alias="university")
    tags: Optional[Any] = None
    contact_link: Optional[Any] = Field(default=None, alias="linkedin")


class RelayRequest(BaseModel):
    userPrompt: str = Field(..., description="Free-text query, e.g. 'find ML researchers at MIT'.")
