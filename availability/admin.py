from django.contrib import admin
from django.db.models import Count
from availability.models import (
    Game,
    Player,
    Availability,
    Team,
    Match,
    LadderEntry,
)


class AvailabilityInline(admin.TabularInline):
    model = Availability
    extra = 0
    fields = ("player", "status", "updated_at")
    readonly_fields = ("updated_at",)
    autocomplete_fields = ("player",)


@admin.register(Game)
class GameAdmin(admin.ModelAdmin):
    list_display = ("kickoff_at", "home", "away", "venue", "answer_count", "source_key")
    search_fields = ("home", "away", "source_key")
    list_filter = ("venue",)
    date_hierarchy = "kickoff_at"
    readonly_fields = ("created_at", "updated_at")
    inlines = [AvailabilityInline]

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(answers=Count("availability"))

    @admin.display(description="Answers", ordering="answers")
    def answer_count(self, obj):
        return obj.answers


@admin.register(Player)
class PlayerAdmin(admin.ModelAdmin):
    list_display = ("name", "created_at")
    search_fields = ("name",)


@admin.register(Availability)
class AvailabilityAdmin(admin.ModelAdmin):
    list_display = ("player", "game", "status", "updated_at")
    list_filter = ("status",)
    search_fields = ("player__name", "game__home", "game__away", "game__source_key")
    list_select_related = ("player", "game")


@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    list_display = ("team_key", "name_full", "short_name")
    search_fields = ("team_key", "name_full", "short_name")


@admin.register(Match)
class MatchAdmin(admin.ModelAdmin):
    list_display = (
        "season",
        "round_label",
        "kickoff_at",
        "home_team_key",
        "away_team_key",
        "home_score",
        "away_score",
    )
    list_filter = ("season", "round_label")
    search_fields = ("home_team_key", "away_team_key", "venue")


@admin.register(LadderEntry)
class LadderEntryAdmin(admin.ModelAdmin):
    list_display = ("season", "position", "team_key", "played", "wins", "draws", "losses", "gd", "points")
    list_filter = ("season",)
    ordering = ("season", "position")
