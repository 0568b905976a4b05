"""Bird model: a single bird-watching log entry.

The catalog fields (``name``, ``species``) are public.  The timestamps
inherited from ``TimestampedModel`` are server-managed and hidden by the
default API field policy.
"""

from __future__ import annotations

import structlog

from django.db import models

from modules.core.models import TimestampedModel

logger = structlog.get_logger(__name__)


class Bird(TimestampedModel):
    """Bird sighting entry.

    ``id`` is an auto-increment integer assigned on creation and never
    reassigned.  Default ordering by ``id`` keeps collections in
    insertion order.
    """

    name = models.CharField(max_length=255)
    species = models.CharField(max_length=255)

    class Meta:
        db_table = "birds"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["species"], name="birds_species_idx"),
        ]

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info(
                "bird.created",
                bird_id=self.id,
                name=self.name,
                species=self.species,
            )

    def __str__(self) -> str:
        return f"{self.name} ({self.species})"
