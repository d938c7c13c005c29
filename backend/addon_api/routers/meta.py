"""Metadata endpoints."""
from fastapi import APIRouter, Depends, Path

from backend.resolver.metadata import MetadataService

from ..dependencies import get_metadata_service
from ..schemas import MetaModel, MetaResponse

router = APIRouter(prefix="/meta", tags=["meta"])


@router.get("/{content_type}/{content_id}.json", response_model=MetaResponse)
def get_meta(
    content_type: str = Path(description="Content type, movie or series."),
    content_id: str = Path(description="Opaque content identifier."),
    metadata_service: MetadataService = Depends(get_metadata_service),
) -> MetaResponse:
    """Return the metadata stub for a content id, cached for 24 hours."""

    meta = metadata_service.get_meta(content_type, content_id)
    return MetaResponse(meta=MetaModel.from_item(meta))
