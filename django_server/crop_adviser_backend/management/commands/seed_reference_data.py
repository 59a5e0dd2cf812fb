from django.core.management.base import BaseCommand

from crop_adviser_backend.models import Region, SoilType, Crop
from crop_adviser_backend.services import seed_reference_data


class Command(BaseCommand):
    help = 'Seeds the states, soil types and crops. Safe to run repeatedly.'

    def handle(self, *args, **options):
        self.stdout.write("Seeding reference data...")
        created = seed_reference_data()

        if any(created.values()):
            self.stdout.write(self.style.SUCCESS(
                f"Created {created['states']} states, {created['soilTypes']} soil types and {created['crops']} crops."
            ))
        else:
            self.stdout.write("Reference data was already complete, nothing created.")

        self.stdout.write(f"States: {Region.objects.count()}, soil types: {SoilType.objects.count()}, crops: {Crop.objects.count()}")
