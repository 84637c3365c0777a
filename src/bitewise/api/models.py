"""Pydantic models for the ask endpoint."""

from pydantic import BaseModel, Field


class AskRequest(BaseModel):
    """Question payload."""

    question: str = Field(min_length=1)


class AskResponse(BaseModel):
    """Answer payload."""

    answer: str
    used_enrichment: bool = Field(serialization_alias="usedEnrichment")
