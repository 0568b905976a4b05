"""Bird repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.birds.models import Bird


class IBirdRepository(IRepository["Bird"]):
    """Repository contract for the Bird aggregate.

    Read access is all the API needs; ``save`` exists for seeding and
    other collaborators that create records.
    """

    @abstractmethod
    def all(self) -> QuerySet[Bird]:
        """Lazy query over every bird, for ``FilterSet`` narrowing."""
