from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
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
                (
                    "type",
                    models.CharField(
                        choices=[
                            ("NORMAL", "Normal"),
                            ("SEASONAL", "Seasonal"),
                            ("EXPIRABLE", "Expirable"),
                        ],
                        max_length=20,
                    ),
                ),
                ("available", models.PositiveIntegerField(default=0)),
                ("lead_time", models.IntegerField(default=0)),
                (
                    "season_start_date",
                    models.DateTimeField(blank=True, default=None, null=True),
                ),
                (
                    "season_end_date",
                    models.DateTimeField(blank=True, default=None, null=True),
                ),
                (
                    "expiry_date",
                    models.DateTimeField(blank=True, default=None, null=True),
                ),
            ],
            options={
                "db_table": "products",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["type"], name="products_type_idx"),
                ],
            },
        ),
        migrations.AddConstraint(
            model_name="product",
            constraint=models.CheckConstraint(
                condition=models.Q(available__gte=0),
                name="products_available_non_negative",
            ),
        ),
    ]
