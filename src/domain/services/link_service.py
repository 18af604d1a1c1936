"""Link service."""

from domain.entities.link import Link
from domain.services.collection_service import OrderedCollectionService


class LinkService(OrderedCollectionService[Link]):
    """Service layer for custom Link cards."""

    collection = "links"
    entity = Link
