"""Bird repositories package."""

from modules.birds.repositories.django_repository import BirdDjangoRepository
from modules.birds.repositories.interfaces import IBirdRepository

__all__ = ["IBirdRepository", "BirdDjangoRepository"]
