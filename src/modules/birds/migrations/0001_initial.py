from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Bird",
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
                ("name", models.CharField(max_length=255)),
                ("species", models.CharField(max_length=255)),
            ],
            options={
                "db_table": "birds",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["species"], name="birds_species_idx"),
                ],
            },
        ),
    ]
