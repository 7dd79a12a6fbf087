"""
Initial migration: demo_user table.
"""

from django.db import migrations, models


class Migration(migrations.Migration):
    """Create the User model."""

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("username", models.CharField(max_length=180, unique=True)),
                ("password", models.CharField(max_length=255)),
                ("email", models.EmailField(max_length=180)),
                ("enabled", models.BooleanField(default=False)),
                ("roles", models.JSONField(blank=True, default=list)),
            ],
            options={
                "verbose_name": "User",
                "verbose_name_plural": "Users",
                "db_table": "demo_user",
                "ordering": ["username"],
            },
        ),
    ]
