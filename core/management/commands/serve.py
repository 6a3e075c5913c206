import logging

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Sync the database schema, then serve the app on PORT."

    def add_arguments(self, parser):
        parser.add_argument("--port", type=int, default=None, help="Listen port (default: settings.PORT).")
        parser.add_argument("--host", default="0.0.0.0")
        parser.add_argument("--noreload", action="store_true", help="Disable the auto-reloader.")

    def handle(self, *args, **options):
        port = options["port"] or settings.PORT

        # Schema sync; a failure here is fatal (exit status 1)
        try:
            call_command("migrate", interactive=False, verbosity=0)
        except Exception as e:
            logger.exception("Schema sync failed")
            raise CommandError(f"Error starting server: {e}") from e
        self.stdout.write(self.style.SUCCESS("✅ Models synced with the database!"))

        self.stdout.write(self.style.NOTICE(f"Server running on http://localhost:{port}"))
        call_command(
            "runserver",
            f"{options['host']}:{port}",
            use_reloader=not options["noreload"],
        )
