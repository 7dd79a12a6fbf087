"""
Management command to seed the super admin user.

Usage:
    python scripts/run_manage.py load_user_data

Failure Behavior:
- Errors from the database (e.g. IntegrityError when the user already
  exists) propagate; Django's management framework reports them and exits
  with a non-zero status.
"""

from django.core.management.base import BaseCommand

from demo.users.fixtures import DjangoObjectManager, DjangoPasswordEncoder, LoadUserData


class Command(BaseCommand):
    """Load the super admin user fixture."""

    help = "Create the super admin user (run once against an empty database)"

    def add_arguments(self, parser):
        parser.add_argument(
            "--database",
            default="default",
            help="Database alias to load into (default: default)",
        )

    def handle(self, *args, **options):
        manager = DjangoObjectManager(using=options["database"])
        fixture = LoadUserData(encoder=DjangoPasswordEncoder())

        self.stdout.write("Loading user fixtures...")

        user = fixture.load(manager)

        self.stdout.write(
            self.style.SUCCESS(
                f"Created user {user.username} <{user.email}> "
                f"with roles {', '.join(user.roles)}"
            )
        )
