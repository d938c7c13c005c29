"""Stream resolution endpoints."""
from fastapi import APIRouter, Depends, Path

from backend.resolver.service import StreamService

from ..dependencies import get_stream_service
from ..schemas import StreamModel, StreamsResponse

router = APIRouter(prefix="/stream", tags=["stream"])


@router.get("/{content_type}/{content_id}.json", response_model=StreamsResponse)
def get_streams(
    content_type: str = Path(description="Content type, movie or series."),
    content_id: str = Path(description="Opaque content identifier."),
    stream_service: StreamService = Depends(get_stream_service),
) -> StreamsResponse:
    """Resolve playable locators for a content id.

    An empty ``streams`` list is a normal outcome when no source yields a
    manifest; resolution failures are never reported as HTTP errors.
    """

    streams = stream_service.get_streams(content_id)
    return StreamsResponse(streams=[StreamModel.from_locator(stream) for stream in streams])
