import pytest

from rest_framework.test import APIClient

from modules.birds.models import Bird
from modules.core.management.commands.seed_data import CATALOG


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def bird_catalog():
    """Four persisted birds, in insertion (and ``id``) order."""
    birds = []
    for name, species in CATALOG:
        bird = Bird(name=name, species=species)
        bird.save()
        birds.append(bird)
    return birds
