"""SQLAlchemy implementation of Product repository."""

from domain.entities.product import Product
from infrastructure.database.models import ProductModel
from infrastructure.database.repositories.sqlalchemy_collection_repo import (
    SQLAlchemyOrderedCollectionRepository,
)


class SQLAlchemyProductRepository(SQLAlchemyOrderedCollectionRepository[Product]):
    """SQLAlchemy implementation of IProductRepository."""

    model = ProductModel

    def _to_entity(self, model: ProductModel) -> Product:
        """Convert ORM model to domain entity."""
        return Product(
            id=model.id,
            profile_id=model.profile_id,
            name=model.name,
            description=model.description,
            price=model.price,
            currency=model.currency,
            image_url=model.image_url,
            purchase_url=model.purchase_url,
            order_index=model.order_index,
            is_visible=model.is_visible,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Product) -> ProductModel:
        """Convert domain entity to ORM model."""
        return ProductModel(
            id=entity.id,
            profile_id=entity.profile_id,
            name=entity.name,
            description=entity.description,
            price=entity.price,
            currency=entity.currency,
            image_url=entity.image_url,
            purchase_url=entity.purchase_url,
            order_index=entity.order_index,
            is_visible=entity.is_visible,
            created_at=entity.created_at,
        )
