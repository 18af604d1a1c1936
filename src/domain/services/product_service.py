"""Product service."""

from domain.entities.product import Product
from domain.services.collection_service import OrderedCollectionService


class ProductService(OrderedCollectionService[Product]):
    """Service layer for Products."""

    collection = "products"
    entity = Product
