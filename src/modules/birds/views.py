"""Bird API views.

Exposes the ``BirdService`` via HTTP using a DRF ViewSet.  Every
response goes through ``BirdSerializer`` with the endpoint field policy
(``settings.BIRDS_FIELD_POLICY``) and, optionally, a client policy
taken from ``?fields=`` / ``?exclude=``.

Domain exceptions are caught and translated into appropriate
HTTP status codes; the view never swallows generic exceptions.
"""

from __future__ import annotations

from typing import Optional

import structlog
from django.conf import settings
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.birds.exceptions import BirdNotFound
from modules.birds.filters import BirdFilter
from modules.birds.repositories.django_repository import BirdDjangoRepository
from modules.birds.serializers import BirdSerializer
from modules.birds.services import BirdService
from modules.core.field_policy import ConflictingFieldPolicy, FieldPolicy

logger = structlog.get_logger(__name__)


class BirdViewSet(GenericViewSet):
    """Read-only ViewSet for birds (list + retrieve).

    Uses ``BirdService`` with ``BirdDjangoRepository`` (DIP).  The list
    endpoint returns a bare JSON array; there is no pagination envelope.
    """

    serializer_class = BirdSerializer
    filterset_class = BirdFilter
    filter_backends = [DjangoFilterBackend]
    pagination_class = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._repository = BirdDjangoRepository()
        self._service = BirdService(repository=self._repository)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def get_queryset(self):
        return self._repository.all()

    @staticmethod
    def get_field_policy() -> FieldPolicy:
        return FieldPolicy.from_settings(settings.BIRDS_FIELD_POLICY)

    def _requested_policy(self, request: Request) -> Optional[FieldPolicy]:
        try:
            return FieldPolicy.from_query_params(request.query_params)
        except ConflictingFieldPolicy:
            logger.warning("field_policy.rejected", path=request.path)
            raise

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/birds/

        Filtering (name, species, min_id) is handled by ``BirdFilter``
        via ``filter_backends``; invalid filter values yield 400.
        """
        try:
            requested = self._requested_policy(request)
        except ConflictingFieldPolicy as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        birds = self._service.list_birds(
            queryset=self.filter_queryset(self.get_queryset())
        )
        serializer = BirdSerializer(
            birds,
            many=True,
            policy=self.get_field_policy(),
            requested=requested,
        )
        return Response(serializer.data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/birds/{pk}/"""
        try:
            requested = self._requested_policy(request)
        except ConflictingFieldPolicy as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        if pk is None:
            return Response(
                {"detail": "Bird not found."},
                status=status.HTTP_404_NOT_FOUND,
            )
        try:
            bird = self._service.get_bird(pk)
        except BirdNotFound:
            return Response(
                {"detail": "Bird not found."},
                status=status.HTTP_404_NOT_FOUND,
            )
        serializer = BirdSerializer(
            bird,
            policy=self.get_field_policy(),
            requested=requested,
        )
        return Response(serializer.data)
