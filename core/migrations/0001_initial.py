# Generated manually for the initial schema.

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.AutoField(primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=150)),
                ("username", models.CharField(max_length=150, unique=True)),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("password", models.CharField(max_length=128)),
                (
                    "role",
                    models.CharField(
                        choices=[
                            ("user", "User"),
                            ("engineer", "Engineer"),
                            ("admin", "Admin"),
                        ],
                        default="user",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={"db_table": "users"},
        ),
        migrations.CreateModel(
            name="Complaint",
            fields=[
                ("id", models.AutoField(primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=150)),
                ("email", models.EmailField(max_length=254)),
                ("contact", models.CharField(max_length=50)),
                ("desc", models.TextField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "submitted_by",
                    models.ForeignKey(
                        db_column="submitted_by",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="complaints",
                        to="core.user",
                    ),
                ),
            ],
            options={"db_table": "complaints", "ordering": ["-created_at", "-id"]},
        ),
        migrations.CreateModel(
            name="ComplaintMapping",
            fields=[
                ("id", models.AutoField(primary_key=True, serialize=False)),
                ("engineer_name", models.CharField(db_index=True, max_length=150)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "complaint",
                    models.ForeignKey(
                        db_column="complaint_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="mappings",
                        to="core.complaint",
                    ),
                ),
            ],
            options={"db_table": "complaint_mappings", "ordering": ["-created_at", "-id"]},
        ),
    ]
