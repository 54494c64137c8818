"""
Management command to initialize the registrations collection indexes.
"""

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from pymongo.errors import PyMongoError

from core.mongo import ensure_indexes


class Command(BaseCommand):
    help = "Create the unique email index on the registrations collection"

    def handle(self, *args, **options):
        collection = settings.PARTICIPANTS_COLLECTION
        self.stdout.write(f"Initializing indexes for {collection}...")
        try:
            ensure_indexes()
        except PyMongoError as e:
            raise CommandError(f"Error initializing {collection}: {e}") from e
        self.stdout.write(self.style.SUCCESS(f"Successfully initialized {collection}"))
