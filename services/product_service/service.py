import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from shared.errors import NotFoundError, ValidationError
from shared.identifiers import is_valid_object_id
from shared.observability import b2b_products_created_total

from .models import Product
from .repository import ProductRepository
from .schemas import ProductCreate, ProductUpdate

logger = structlog.get_logger(__name__)


def ensure_product_id(product_id: str) -> str:
    if not is_valid_object_id(product_id):
        raise ValidationError("Invalid product id")
    return product_id


class ProductService:

    @staticmethod
    async def create_product(db: AsyncSession, data: ProductCreate) -> Product:
        product = Product(
            name=data.name,
            brand=data.brand,
            category=data.category,
            description=data.description,
            image=data.image,
            price=data.price,
            rating=data.rating,
            min_qty=data.min_qty,
            main_quantity=data.main_quantity,
            stock=data.main_quantity,
            owner_email=data.owner_email,
        )
        product = await ProductRepository.create_product(db, product)
        b2b_products_created_total.inc()
        logger.info("product_created", product_id=product.id, owner_email=product.owner_email)
        return product

    @staticmethod
    async def list_products(db: AsyncSession, category: str | None = None, owner_email: str | None = None):
        return await ProductRepository.list_products(db, category=category, owner_email=owner_email)

    @staticmethod
    async def get_product(db: AsyncSession, product_id: str) -> Product:
        ensure_product_id(product_id)
        product = await ProductRepository.get_product_by_id(db, product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product

    @staticmethod
    async def update_product(db: AsyncSession, product_id: str, data: ProductUpdate) -> None:
        ensure_product_id(product_id)
        changes = data.changes()
        matched = await ProductRepository.update_product(db, product_id, changes)
        if matched == 0:
            raise NotFoundError("Product not found")
        logger.info("product_updated", product_id=product_id, fields=sorted(changes))
