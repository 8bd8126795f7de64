from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from app.core.config import settings
from app.core.dependencies import get_product_repository
from app.dao.product_repository import ProductRepository
from app.models.product import Product, ProductCreate, ProductRead
from typing import List, Optional
import structlog

logger = structlog.get_logger()

router = APIRouter(prefix="/products", tags=["Products"])

# Ids are signed 64-bit integers
PRODUCT_ID_MIN = -(2**63)
PRODUCT_ID_MAX = 2**63 - 1


@router.post("", response_model=ProductRead)
async def create_product(
    product: ProductCreate,
    repository: ProductRepository = Depends(get_product_repository)
):
    """Create a product; the id is assigned by the store"""
    return await repository.save(Product(**product.model_dump()))


@router.get("", response_model=List[ProductRead])
async def get_all_products(
    skip: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=0),
    repository: ProductRepository = Depends(get_product_repository)
):
    """Get all products"""
    return await repository.find_all(skip=skip, limit=limit)


@router.get("/{product_id}", response_model=Optional[ProductRead])
async def get_product_by_id(
    product_id: int = Path(..., ge=PRODUCT_ID_MIN, le=PRODUCT_ID_MAX),
    repository: ProductRepository = Depends(get_product_repository)
):
    """Get a product by id, or null when there is none"""
    product = await repository.find_by_id(product_id)
    if product is None:
        logger.info("Product not found", product_id=product_id)
        if settings.not_found_as_404:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found"
            )
    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int = Path(..., ge=PRODUCT_ID_MIN, le=PRODUCT_ID_MAX),
    repository: ProductRepository = Depends(get_product_repository)
):
    """Delete a product; unknown ids are ignored"""
    await repository.delete_by_id(product_id)
