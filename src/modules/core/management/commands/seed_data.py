from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.birds.models import Bird
from modules.birds.repositories.django_repository import BirdDjangoRepository

CATALOG = [
    ("Common Starling", "Sturnus Vulgaris"),
    ("House Sparrow", "Passer Domesticus"),
    ("Rock Pigeon", "Columba Livia"),
    ("European Robin", "Erithacus Rubecula"),
]


class Command(BaseCommand):
    help = "Seed database with the bird catalog used in development."

    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")
        created = self._seed_birds()
        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: birds_created={created}, "
                f"birds_total={Bird.objects.count()}"
            )
        )

    def _seed_birds(self) -> int:
        self.stdout.write("Creating birds...")
        repo = BirdDjangoRepository()
        created = 0
        for name, species in CATALOG:
            if Bird.objects.filter(name=name).exists():
                continue
            repo.save(Bird(name=name, species=species))
            created += 1
        self.stdout.write(self.style.SUCCESS("Creating birds... Done!"))
        return created
