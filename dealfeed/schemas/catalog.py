"""Schemas for stores, categories, uploads and barcode scans."""

from pydantic import Field

from dealfeed.schemas.common import CamelModel


class StoreCreate(CamelModel):
    """Fields for a new store."""

    name: str = Field(min_length=1)
    location: str = Field(min_length=1)
    address: str | None = None
    latitude: str | None = None
    longitude: str | None = None
    logo_url: str | None = None


class CategoryCreate(CamelModel):
    """Fields for a new category."""

    name: str = Field(min_length=1)
    image_url: str | None = None
    color: str | None = None


class UploadResponse(CamelModel):
    image_url: str


class ScanRequest(CamelModel):
    barcode: str | None = None


class ScannedProduct(CamelModel):
    """Product resolved from a barcode scan."""

    barcode: str
    name: str
    price: str
    category: str
