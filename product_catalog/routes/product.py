# routes/product.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status

from product_catalog.config import settings
from product_catalog.database.dependencies import get_product_service
from product_catalog.models.schemas.product import Product, ProductCreate, ProductUpdate
from product_catalog.services.product import ProductService

router = APIRouter(prefix=settings.API_PREFIX, tags=["products"])

# Fixed paths are registered before "/{product_id}".

# Ids are 64-bit signed integers in the database.
MAX_PRODUCT_ID = 2**63 - 1
MIN_PRODUCT_ID = -(2**63)


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    data: ProductCreate,
    service: ProductService = Depends(get_product_service),
):
    """Create a product; the id is assigned by the store."""
    return service.add_product(data)


@router.get("", response_model=List[Product])
def list_products(service: ProductService = Depends(get_product_service)):
    """List every product in store order."""
    return service.get_all_products()


@router.get(
    "/search",
    response_model=List[Product],
    responses={204: {"description": "No product name matches"}},
)
def search_products(
    name: Optional[str] = Query(default=None),
    service: ProductService = Depends(get_product_service),
):
    """Products whose name contains ``name``."""
    if name is None or not name.strip():
        raise HTTPException(status_code=400, detail="Query parameter 'name' is required")

    products = service.get_products_by_name(name)
    if not products:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return products


@router.get("/total-count", response_model=int)
def get_total_product_count(service: ProductService = Depends(get_product_service)):
    return service.get_total_product_count()


@router.get("/sort", response_model=List[Product])
def get_sorted_products(
    sort_by: Optional[str] = Query(default=None, alias="sortBy"),
    sort_order: Optional[str] = Query(default=None, alias="sortOrder"),
    service: ProductService = Depends(get_product_service),
):
    """Full catalog sorted by name, category or price; ``sortOrder=desc`` reverses it."""
    return service.sort_products(sort_by, sort_order)


@router.get("/category/{category}", response_model=List[Product])
def get_products_by_category(
    category: str,
    service: ProductService = Depends(get_product_service),
):
    products = service.get_products_by_category(category)
    if not products:
        raise HTTPException(status_code=404, detail="No products found")
    return products


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: int = Path(..., ge=MIN_PRODUCT_ID, le=MAX_PRODUCT_ID),
    service: ProductService = Depends(get_product_service),
):
    """Get a specific product by ID."""
    product = service.get_product_by_id(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_product(
    data: ProductUpdate,
    product_id: int = Path(..., ge=MIN_PRODUCT_ID, le=MAX_PRODUCT_ID),
    service: ProductService = Depends(get_product_service),
):
    """Replace an existing product. The path id must match the body id."""
    if product_id != data.id:
        raise HTTPException(status_code=400, detail="Product Id does not match")

    service.update_product(data)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int = Path(..., ge=MIN_PRODUCT_ID, le=MAX_PRODUCT_ID),
    service: ProductService = Depends(get_product_service),
):
    if not service.delete_product(product_id):
        raise HTTPException(status_code=404, detail="Product not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def delete_all_products(service: ProductService = Depends(get_product_service)):
    service.delete_all_products()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
