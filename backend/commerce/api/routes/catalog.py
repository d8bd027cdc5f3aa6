"""Catalog Routes - read-only storefront endpoints."""

from fastapi import APIRouter, Depends

from commerce.api.dependencies import store_catalog_facade
from commerce.schemas.catalog import CatalogListResponse, CatalogProductResponse
from commerce.services.facades import StoreCatalogFacade

router = APIRouter(prefix="/catalog/products", tags=["catalog"])


@router.get("", response_model=CatalogListResponse)
async def list_catalog_products(
    facade: StoreCatalogFacade = Depends(store_catalog_facade),
):
    return await facade.find_all()


@router.get("/{product_id}", response_model=CatalogProductResponse)
async def find_catalog_product(
    product_id: str, facade: StoreCatalogFacade = Depends(store_catalog_facade),
):
    return await facade.find(product_id)
