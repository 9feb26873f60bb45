"""
Django management command to show how a source key is reconciled.

Lists every legacy candidate key tried for a fixture and the game rows
they match, so the legacy offsets can be checked against stored data.

Usage:
    python manage.py reconcile_source_key "2026-03-01T10:00:00.000Z|Briars 3|Macquarie Uni 2"
    python manage.py reconcile_source_key "<key>" --timezone Australia/Sydney
"""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from django.core.management.base import BaseCommand, CommandError

from availability.models import Game
from availability.services.legacy_keys import (
    build_candidate_source_keys,
    find_matching_game_ids,
    get_legacy_local_timezone,
    parse_source_key,
)


class Command(BaseCommand):
    help = "Show the legacy candidate keys and matching games for a fixture source key"

    def add_arguments(self, parser) -> None:
        parser.add_argument("source_key", type=str, help="kickoffISO|home|away")
        parser.add_argument(
            "--timezone",
            type=str,
            default=None,
            help="Local timezone the legacy writer used (default: LEGACY_KEY_LOCAL_TIMEZONE)",
        )

    def handle(self, *args, **options) -> None:
        source_key: str = options["source_key"]
        tz_name: str | None = options["timezone"]

        if tz_name:
            try:
                local_tz = ZoneInfo(tz_name)
            except (ZoneInfoNotFoundError, ValueError):
                raise CommandError(f"Unknown timezone: {tz_name}")
        else:
            local_tz = get_legacy_local_timezone()

        parsed = parse_source_key(source_key)
        if parsed is None:
            self.stdout.write(
                self.style.WARNING("Key is not kickoff|home|away; exact match only")
            )
        else:
            self.stdout.write(f"Candidate keys ({local_tz.key}):")
            for key in build_candidate_source_keys(
                parsed.kickoff_iso, parsed.home, parsed.away, local_tz
            ):
                self.stdout.write(f"  {key}")

        game_ids = find_matching_game_ids(Game.objects.all(), source_key, local_tz)
        if not game_ids:
            self.stdout.write(self.style.WARNING("No matching games"))
            return

        self.stdout.write(self.style.SUCCESS(f"Matching games ({len(game_ids)}):"))
        for game in Game.objects.filter(id__in=game_ids).order_by("id"):
            self.stdout.write(f"  #{game.id} {game.source_key}")
