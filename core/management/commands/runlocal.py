"""Development server that does not check migrations."""

from django.core.management.commands.runserver import Command as RunServer


class Command(RunServer):
    """``runserver`` without the migration check.

    The publication tables are owned by another service, so there are no
    local migrations and no database is needed just to start serving.
    """

    help = "Start the development server without migration checks"

    def check_migrations(self, *_args, **_kwargs):
        self.stdout.write(
            self.style.WARNING("Skipping migration checks (schema owned externally)")
        )
