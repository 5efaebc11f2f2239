import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="BadgeEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("badge_identifier", models.CharField(max_length=255, unique=True)),
                ("created", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "verbose_name": "Badge Entry",
                "verbose_name_plural": "Badge Entries",
                "ordering": ("badge_identifier",),
            },
        ),
        migrations.CreateModel(
            name="ProjectEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("account_name", models.CharField(max_length=200)),
                ("project_name", models.CharField(max_length=200)),
                ("created", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "verbose_name": "Project Entry",
                "verbose_name_plural": "Project Entries",
                "ordering": ("account_name", "project_name"),
            },
        ),
        migrations.CreateModel(
            name="RequestEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
            ],
            options={
                "verbose_name": "Request Entry",
                "verbose_name_plural": "Request Entries",
                "ordering": ("-created", "-pk"),
            },
        ),
        migrations.AddConstraint(
            model_name="projectentry",
            constraint=models.UniqueConstraint(fields=("account_name", "project_name"), name="stats_projectentry_unique_project"),
        ),
    ]
