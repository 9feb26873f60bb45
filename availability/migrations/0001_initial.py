import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Game",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("source_key", models.CharField(db_index=True, help_text="kickoffISO|home|away as produced by the fixtures scraper", max_length=500)),
                ("kickoff_at", models.DateTimeField()),
                ("home", models.CharField(max_length=200)),
                ("away", models.CharField(max_length=200)),
                ("venue", models.CharField(blank=True, max_length=200, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "games",
                "ordering": ["kickoff_at", "id"],
            },
        ),
        migrations.CreateModel(
            name="Player",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100, unique=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "players",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Team",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("team_key", models.CharField(max_length=100, unique=True)),
                ("name_full", models.CharField(max_length=200)),
                ("short_name", models.CharField(blank=True, default="", max_length=100)),
            ],
            options={
                "db_table": "teams",
                "ordering": ["name_full"],
            },
        ),
        migrations.CreateModel(
            name="Match",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("season", models.CharField(db_index=True, max_length=20)),
                ("round_label", models.CharField(blank=True, default="", max_length=50)),
                ("kickoff_at", models.DateTimeField()),
                ("venue", models.CharField(blank=True, default="", max_length=200)),
                ("home_team_key", models.CharField(max_length=100)),
                ("away_team_key", models.CharField(max_length=100)),
                ("home_score", models.PositiveIntegerField(blank=True, null=True)),
                ("away_score", models.PositiveIntegerField(blank=True, null=True)),
                ("source_hash", models.CharField(max_length=64, unique=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "matches",
                "ordering": ["kickoff_at"],
                "verbose_name_plural": "matches",
            },
        ),
        migrations.CreateModel(
            name="LadderEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("season", models.CharField(db_index=True, max_length=20)),
                ("team_key", models.CharField(max_length=100)),
                ("position", models.PositiveIntegerField()),
                ("played", models.PositiveIntegerField(default=0)),
                ("wins", models.PositiveIntegerField(default=0)),
                ("draws", models.PositiveIntegerField(default=0)),
                ("losses", models.PositiveIntegerField(default=0)),
                ("gf", models.PositiveIntegerField(default=0, help_text="Goals for")),
                ("ga", models.PositiveIntegerField(default=0, help_text="Goals against")),
                ("gd", models.IntegerField(default=0, help_text="Goal difference")),
                ("points", models.IntegerField(default=0)),
                ("as_of", models.DateTimeField(blank=True, null=True)),
            ],
            options={
                "db_table": "ladder_latest",
                "ordering": ["season", "position"],
                "verbose_name_plural": "ladder entries",
                "unique_together": {("season", "team_key")},
            },
        ),
        migrations.CreateModel(
            name="Availability",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("status", models.CharField(choices=[("yes", "Yes"), ("maybe", "Maybe"), ("no", "No")], max_length=5)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("game", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="availability", to="availability.game")),
                ("player", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="availability", to="availability.player")),
            ],
            options={
                "db_table": "availability",
                "verbose_name_plural": "availability",
                "unique_together": {("game", "player")},
            },
        ),
    ]
