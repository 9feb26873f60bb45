"""
Availability service functions.

Reads and writes player availability for a fixture. Every lookup goes
through the legacy key reconciler so answers recorded against older
spellings of a fixture's source key are still counted.
"""

import logging

from django.db import transaction
from django.utils import timezone

from availability.models import Availability, Game, Player
from .legacy_keys import (
    clean_input,
    find_existing_game_id,
    find_matching_game_ids,
    parse_kickoff,
)

logger = logging.getLogger(__name__)

STATUS_ORDER = [
    Availability.Status.YES,
    Availability.Status.MAYBE,
    Availability.Status.NO,
]


def _games(games):
    return Game.objects.all() if games is None else games


def get_player_status(source_key, player_name, games=None):
    """Return the status a player recorded for a fixture, or None."""
    player_name = clean_input(player_name)
    if len(player_name) < 2:
        return None

    player = Player.objects.filter(name=player_name).first()
    if player is None:
        return None

    game_ids = find_matching_game_ids(_games(games), source_key)
    if not game_ids:
        return None

    return (
        Availability.objects.filter(player=player, game_id__in=game_ids)
        .order_by("-updated_at")
        .values_list("status", flat=True)
        .first()
    )


def get_names_by_status(source_key, games=None):
    """Return player names grouped by status, each list deduplicated and sorted."""
    names = {str(status): [] for status in STATUS_ORDER}

    game_ids = find_matching_game_ids(_games(games), source_key)
    if not game_ids:
        return names

    rows = Availability.objects.filter(game_id__in=game_ids).values_list(
        "status", "player__name"
    )
    seen = {status: set() for status in names}
    for status, raw_name in rows:
        name = clean_input(raw_name)
        if not name or status not in names or name in seen[status]:
            continue
        seen[status].add(name)
        names[status].append(name)

    for status in names:
        names[status].sort(key=lambda n: (n.casefold(), n))
    return names


def get_status_counts(source_key, games=None):
    """Return yes/no/maybe counts across every row matching the fixture."""
    counts = {"yes": 0, "no": 0, "maybe": 0}

    game_ids = find_matching_game_ids(_games(games), source_key)
    if not game_ids:
        return counts

    statuses = Availability.objects.filter(game_id__in=game_ids).values_list(
        "status", flat=True
    )
    for status in statuses:
        if status in counts:
            counts[status] += 1
    return counts


def upsert_game(game_data, games=None):
    """
    Find the row for a fixture (allowing legacy keys) and refresh it, or create it.

    Returns ``(game_id, created)``.
    """
    games = _games(games)
    fields = {
        "source_key": game_data["source_key"],
        "kickoff_at": parse_kickoff(game_data["kickoff_iso"]),
        "home": clean_input(game_data["home"]),
        "away": clean_input(game_data["away"]),
        "venue": game_data.get("venue"),
    }

    game_id = find_existing_game_id(
        games,
        game_data["source_key"],
        game_data["kickoff_iso"],
        game_data["home"],
        game_data["away"],
    )
    if game_id is None:
        game = games.create(**fields)
        logger.info(f"Created game {game.id} for source key {fields['source_key']!r}")
        return game.id, True

    # Keep the existing row in step with the latest scrape
    games.filter(pk=game_id).update(updated_at=timezone.now(), **fields)
    return game_id, False


def record_availability(payload, games=None):
    """
    Save a player's status for a fixture from a validated payload.

    The game row is found or created first, then the player, then the
    availability row is inserted or updated on (game, player).
    """
    with transaction.atomic():
        game_id, _created = upsert_game(payload["game"], games)
        player, _ = Player.objects.get_or_create(name=clean_input(payload["player_name"]))
        Availability.objects.update_or_create(
            game_id=game_id,
            player=player,
            defaults={"status": payload["status"]},
        )

    logger.info(
        f"Recorded {payload['status']!r} for {player.name} on game {game_id}"
    )
    return {"status": payload["status"], "game_id": game_id}
