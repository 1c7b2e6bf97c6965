"""Reference data and utility endpoints.

GET  /api/stores        - all stores
GET  /api/categories    - all categories
POST /api/upload        - image upload (returns the placeholder URL)
POST /api/scan-barcode  - resolve a barcode to a catalog product
"""

from fastapi import APIRouter, Body, Depends

from dealfeed.models import Category, Store
from dealfeed.schemas import ScannedProduct, ScanRequest, UploadResponse
from dealfeed.services.barcode import scan_barcode
from dealfeed.settings import Settings, get_settings
from dealfeed.stores.memory import MemStorage, get_storage

router = APIRouter()


@router.get("/stores", response_model=list[Store])
async def list_stores(storage: MemStorage = Depends(get_storage)) -> list[Store]:
    return storage.list_stores()


@router.get("/categories", response_model=list[Category])
async def list_categories(storage: MemStorage = Depends(get_storage)) -> list[Category]:
    return storage.list_categories()


@router.post("/upload", response_model=UploadResponse)
async def upload_image(settings: Settings = Depends(get_settings)) -> UploadResponse:
    """Accept an image upload. Files are not stored; the URL is a placeholder."""
    return UploadResponse(image_url=settings.upload_placeholder_url)


@router.post("/scan-barcode", response_model=ScannedProduct)
async def scan(payload: ScanRequest | None = Body(default=None)) -> ScannedProduct:
    return scan_barcode(payload.barcode if payload else None)
