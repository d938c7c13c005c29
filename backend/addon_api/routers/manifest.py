"""Addon manifest endpoint."""
from fastapi import APIRouter

from ..schemas import AddonManifest

router = APIRouter(tags=["manifest"])


@router.get("/manifest.json", response_model=AddonManifest, summary="Addon descriptor")
def get_manifest() -> AddonManifest:
    return AddonManifest()
