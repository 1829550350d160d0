from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import get_db
from shared.errors import StoreError

from .schemas import MessageResponse, ProductCreate, ProductCreated, ProductResponse, ProductUpdate
from .service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=list[ProductResponse])
async def list_products(
    category: Optional[str] = Query(default=None),
    email: Optional[str] = Query(default=None, description="Only products owned by this email"),
    db: AsyncSession = Depends(get_db),
):
    try:
        return await ProductService.list_products(db, category=category, owner_email=email)
    except SQLAlchemyError as e:
        raise StoreError("Failed to fetch products") from e


@router.post("", response_model=ProductCreated)
async def create_product(product: ProductCreate, db: AsyncSession = Depends(get_db)):
    try:
        created = await ProductService.create_product(db, product)
    except SQLAlchemyError as e:
        raise StoreError("Failed to add product") from e
    return ProductCreated(productId=created.id)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, db: AsyncSession = Depends(get_db)):
    try:
        return await ProductService.get_product(db, product_id)
    except SQLAlchemyError as e:
        raise StoreError("Failed to fetch product") from e


@router.put("/{product_id}", response_model=MessageResponse)
async def update_product(product_id: str, payload: ProductUpdate, db: AsyncSession = Depends(get_db)):
    try:
        await ProductService.update_product(db, product_id, payload)
    except SQLAlchemyError as e:
        raise StoreError("Failed to update product") from e
    return MessageResponse(message="Product updated successfully")
