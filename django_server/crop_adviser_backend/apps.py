import os
import threading
import time

from django.apps import AppConfig
from django.conf import settings
from django.db import connections
from django.db.migrations.executor import MigrationExecutor
from django.db.utils import OperationalError

from crop_adviser_backend.utils import get_logger


class CropAdviserBackendConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'crop_adviser_backend'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.log = get_logger()

    def initialize_app(self, max_retries=3, retry_interval=3):
        """
        Seeds the reference data once the database is migrated.
        :param max_retries: maximum amount of retries to connect to the database
        :param retry_interval: interval of the retry
        """
        retry_count = 0
        while retry_count < max_retries:
            try:
                if self.has_pending_migrations():
                    self.log.warning(f"Pending migrations detected. Retrying in {retry_interval} seconds...")
                    time.sleep(retry_interval)
                    retry_count += 1
                else:
                    from crop_adviser_backend.services import seed_reference_data
                    seed_reference_data()
                    self.log.info("Started successfully.")
                    break
            except OperationalError as e:
                self.log.error(f"Database not ready yet: {e}")
                time.sleep(retry_interval)
                retry_count += 1
        if retry_count == max_retries:
            self.log.error("Max retries reached. Reference data was not seeded.")

    def has_pending_migrations(self) -> bool:
        """
        Check if there are any pending migrations.
        :return: if there are pending migrations
        """
        try:
            executor = MigrationExecutor(connections['default'])
            targets = executor.loader.graph.leaf_nodes()
            return executor.migration_plan(targets) != []

        except Exception as e:
            self.log.error(f"Error checking migrations: {e}")
            return True

    def ready(self):
        """
        Start a new thread that waits for the migrations and seeds the reference data if SEED_ON_STARTUP is set
        """
        if settings.SEED_ON_STARTUP and os.environ.get('RUN_MAIN') == 'true':
            threading.Thread(target=self.initialize_app, daemon=True).start()
