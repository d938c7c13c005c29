"""Catalog listing endpoints."""
from fastapi import APIRouter, Depends, HTTPException, Path

from backend.resolver.catalog import CatalogService, is_known_catalog

from ..dependencies import get_catalog_service
from ..schemas import CatalogMetaModel, CatalogResponse

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/{content_type}/{catalog_id}.json", response_model=CatalogResponse)
def get_catalog(
    content_type: str = Path(description="Content type, movie or series."),
    catalog_id: str = Path(description="Catalog identifier declared in the manifest."),
    catalog_service: CatalogService = Depends(get_catalog_service),
) -> CatalogResponse:
    """Return scraped listing previews, cached for one hour."""

    if not is_known_catalog(content_type, catalog_id):
        raise HTTPException(status_code=404, detail=f"Unknown catalog '{content_type}/{catalog_id}'")

    items = catalog_service.get_catalog(content_type, catalog_id)
    return CatalogResponse(metas=[CatalogMetaModel.from_item(item) for item in items])
