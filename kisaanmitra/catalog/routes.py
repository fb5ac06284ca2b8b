"""
Read-only catalog API.
"""
from fastapi import APIRouter, HTTPException

from kisaanmitra.catalog.library import CULTIVATION_LIBRARY
from kisaanmitra.catalog.lookup import find_crop
from kisaanmitra.core.errors import NotFoundError

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/crops")
def list_crops():
    return {"crops": [crop.to_dict(include_workflow=False) for crop in CULTIVATION_LIBRARY]}


@router.get("/crops/{crop_id}")
def get_crop(crop_id: str):
    try:
        crop = find_crop(CULTIVATION_LIBRARY, crop_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return crop.to_dict()
