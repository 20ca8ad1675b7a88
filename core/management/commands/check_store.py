from django.core.management.base import BaseCommand, CommandError
from django.db import DEFAULT_DB_ALIAS

from core.db_utils import ensure_store_available
from core.exceptions import StoreUnavailable


class Command(BaseCommand):
    help = "Check that the database is reachable, retrying a few times before failing."

    def add_arguments(self, parser):
        parser.add_argument("--retries", type=int, default=3, help="Retries after the first attempt.")
        parser.add_argument("--delay", type=float, default=2, help="Seconds between attempts.")
        parser.add_argument("--database", default=DEFAULT_DB_ALIAS, help="Database alias to check.")

    def handle(self, *args, **options):
        try:
            connection = ensure_store_available(
                retries=options["retries"],
                delay=options["delay"],
                using=options["database"],
            )
        except StoreUnavailable as e:
            raise CommandError(str(e)) from e

        self.stdout.write(self.style.SUCCESS(f"Database '{options['database']}' is available ({connection.vendor})."))
