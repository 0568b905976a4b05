"""Bird service layer (Use Cases).

Read-side use cases for the Bird aggregate, delegating persistence to
the injected ``IBirdRepository``.  Records are created elsewhere
(admin, seed command); the service only reads them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

import structlog

from modules.birds.exceptions import BirdNotFound

if TYPE_CHECKING:
    from modules.birds.models import Bird
    from modules.birds.repositories.interfaces import IBirdRepository

logger = structlog.get_logger(__name__)


class BirdService:
    """Application service for Bird use-cases.

    Receives an ``IBirdRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IBirdRepository) -> None:
        self._repo = repository

    def list_birds(
        self,
        filters: Optional[Dict[str, Any]] = None,
        queryset: Optional[Iterable[Bird]] = None,
    ) -> List[Bird]:
        """Return birds in ``id`` order.

        ``queryset`` is an already-narrowed query (e.g. from a
        ``FilterSet``); without one the repository is asked for all birds
        matching ``filters``.
        """
        if queryset is not None:
            birds = list(queryset)
        else:
            birds = self._repo.list(filters)
        logger.info("bird.listed", count=len(birds))
        return birds

    def get_bird(self, id: Any) -> Bird:
        """Retrieve a single bird by ID.

        Raises:
            BirdNotFound: if no bird matches ``id``.
        """
        bird = self._repo.get_by_id(id)
        if not bird:
            logger.warning("bird.not_found", bird_id=str(id))
            raise BirdNotFound(f"Bird {id} not found.")
        logger.info("bird.retrieved", bird_id=str(id))
        return bird
