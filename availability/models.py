from django.db import models


class Game(models.Model):
    """A fixture players can mark availability for, keyed by its scraped source key."""

    source_key = models.CharField(
        max_length=500,
        db_index=True,
        help_text="kickoffISO|home|away as produced by the fixtures scraper",
    )
    kickoff_at = models.DateTimeField()
    home = models.CharField(max_length=200)
    away = models.CharField(max_length=200)
    venue = models.CharField(max_length=200, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "games"
        ordering = ["kickoff_at", "id"]
        # source_key is not unique; legacy rows can share a match

    def __str__(self):
        return f"{self.home} vs {self.away} ({self.kickoff_at:%Y-%m-%d %H:%M})"


class Player(models.Model):
    """A team member, identified by the name they type in."""

    name = models.CharField(max_length=100, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "players"
        ordering = ["name"]

    def __str__(self):
        return self.name


class Availability(models.Model):
    """One player's answer for one game."""

    class Status(models.TextChoices):
        YES = "yes", "Yes"
        MAYBE = "maybe", "Maybe"
        NO = "no", "No"

    game = models.ForeignKey(Game, related_name="availability", on_delete=models.CASCADE)
    player = models.ForeignKey(Player, related_name="availability", on_delete=models.CASCADE)
    status = models.CharField(max_length=5, choices=Status.choices)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "availability"
        verbose_name_plural = "availability"
        unique_together = ("game", "player")

    def __str__(self):
        return f"{self.player.name}: {self.status} ({self.game})"


class Team(models.Model):
    """A club team in the grade, keyed the way the ladder scraper keys it."""

    team_key = models.CharField(max_length=100, unique=True)
    name_full = models.CharField(max_length=200)
    short_name = models.CharField(max_length=100, blank=True, default="")

    class Meta:
        db_table = "teams"
        ordering = ["name_full"]

    def __str__(self):
        return self.name_full


class Match(models.Model):
    """A scraped grade fixture or result."""

    season = models.CharField(max_length=20, db_index=True)
    round_label = models.CharField(max_length=50, blank=True, default="")
    kickoff_at = models.DateTimeField()
    venue = models.CharField(max_length=200, blank=True, default="")
    home_team_key = models.CharField(max_length=100)
    away_team_key = models.CharField(max_length=100)
    home_score = models.PositiveIntegerField(null=True, blank=True)
    away_score = models.PositiveIntegerField(null=True, blank=True)
    source_hash = models.CharField(max_length=64, unique=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "matches"
        ordering = ["kickoff_at"]
        verbose_name_plural = "matches"

    def __str__(self):
        return f"{self.season} {self.round_label}: {self.home_team_key} vs {self.away_team_key}"

    @property
    def is_played(self):
        return self.home_score is not None and self.away_score is not None


class LadderEntry(models.Model):
    """Latest ladder position for a team in a season."""

    season = models.CharField(max_length=20, db_index=True)
    team_key = models.CharField(max_length=100)
    position = models.PositiveIntegerField()
    played = models.PositiveIntegerField(default=0)
    wins = models.PositiveIntegerField(default=0)
    draws = models.PositiveIntegerField(default=0)
    losses = models.PositiveIntegerField(default=0)
    gf = models.PositiveIntegerField(default=0, help_text="Goals for")
    ga = models.PositiveIntegerField(default=0, help_text="Goals against")
    gd = models.IntegerField(default=0, help_text="Goal difference")
    points = models.IntegerField(default=0)
    as_of = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "ladder_latest"
        ordering = ["season", "position"]
        unique_together = ("season", "team_key")
        verbose_name_plural = "ladder entries"

    def __str__(self):
        return f"{self.season} #{self.position} {self.team_key}"
