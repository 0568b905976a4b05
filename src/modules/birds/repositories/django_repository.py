"""Django ORM implementation of the Bird repository.

Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import QuerySet

from modules.birds.models import Bird
from modules.birds.repositories.interfaces import IBirdRepository


class BirdDjangoRepository(IBirdRepository):
    """Concrete Bird repository backed by Django ORM."""

    def get_by_id(self, id: Any) -> Optional[Bird]:
        """Retrieve a bird by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return Bird.objects.filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    def all(self) -> QuerySet[Bird]:
        """Unevaluated queryset of all birds in ``id`` order."""
        return Bird.objects.all()

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Bird]:
        """List birds in ``id`` order with optional Django ORM look-ups.

        Examples of valid filters::

            {"species__icontains": "sturnus"}
            {"name": "Common Starling"}
        """
        queryset = self.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    @transaction.atomic
    def save(self, entity: Bird) -> Bird:
        """Persist (create or update) a bird."""
        entity.save()
        return entity
