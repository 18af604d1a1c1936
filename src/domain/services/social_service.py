"""Social link service."""

from domain.entities.social import Social
from domain.services.collection_service import OrderedCollectionService


class SocialService(OrderedCollectionService[Social]):
    """Service layer for Social links. The icon key defaults to the platform."""

    collection = "socials"
    entity = Social
