"""Repurpose API endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request

from repurpose_api.models.content import ErrorResponse, RepurposeRequest, RepurposeResponse
from repurpose_api.services.repurpose_service import RepurposeService

router = APIRouter(prefix="/api", tags=["repurpose"])


def get_repurpose_service(request: Request) -> RepurposeService:
    """Dependency to get the app-wide repurpose service."""
    return request.app.state.repurpose_service


@router.post(
    "/repurpose",
    response_model=RepurposeResponse,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
def repurpose(
    body: RepurposeRequest,
    service: Annotated[RepurposeService, Depends(get_repurpose_service)],
):
    """Fetch an article and turn it into a thread, a long-form post and takeaways.

    Runs in the threadpool: both the page fetch and the model call block.
    """
    url = (body.url or "").strip()
    if not url:
        raise HTTPException(status_code=400, detail="URL is required")

    content = service.repurpose(url)
    return RepurposeResponse.from_content(content)
