"""Repurpose request/response Pydantic models."""

from pydantic import BaseModel, ConfigDict, Field

from generate_content.models import RepurposedContent


class RepurposeRequest(BaseModel):
    """Body of POST /api/repurpose."""

    url: str | None = None


class RepurposeResponse(BaseModel):
    """Generated drafts for one article."""

    model_config = ConfigDict(populate_by_name=True)

    thread: str
    long_form_post: str = Field(alias="longFormPost")
    takeaways: list[str] = Field(min_length=1)

    @classmethod
    def from_content(cls, content: RepurposedContent) -> "RepurposeResponse":
        return cls(
            thread=content.thread,
            long_form_post=content.long_form_post,
            takeaways=list(content.takeaways),
        )


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    message: str
