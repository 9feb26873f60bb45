"""
Validation for availability write requests.

Turns the raw JSON body of a set-availability request into a clean dict,
raising ``AvailabilityPayloadError`` with a user-facing message otherwise.
"""

from availability.models import Availability
from .legacy_keys import clean_input, parse_kickoff


class AvailabilityPayloadError(ValueError):
    """Raised when a set-availability payload is missing or malformed."""


def read_string(value):
    return value if isinstance(value, str) else ""


def parse_set_availability_payload(raw):
    """
    Validate a set-availability body and return the normalized payload.

    Returns a dict with ``pin``, ``player_name``, ``status`` and a ``game``
    dict holding ``source_key``, ``kickoff_iso``, ``home``, ``away`` and
    ``venue``.
    """
    if not isinstance(raw, dict):
        raise AvailabilityPayloadError("Invalid JSON body")

    pin = read_string(raw.get("pin")).strip()
    player_name = clean_input(read_string(raw.get("playerName")))
    status = read_string(raw.get("status"))
    game_raw = raw.get("game") if isinstance(raw.get("game"), dict) else None

    if not pin:
        raise AvailabilityPayloadError("PIN required")
    if len(player_name) < 2:
        raise AvailabilityPayloadError("Player name required")
    if status not in Availability.Status.values:
        raise AvailabilityPayloadError("Invalid status")
    if game_raw is None:
        raise AvailabilityPayloadError("Game payload incomplete")

    source_key = read_string(game_raw.get("source_key")).strip()
    kickoff_iso = read_string(game_raw.get("kickoff_iso")).strip()
    home = clean_input(read_string(game_raw.get("home")))
    away = clean_input(read_string(game_raw.get("away")))
    venue_raw = game_raw.get("venue")
    venue = None if venue_raw is None else clean_input(read_string(venue_raw))

    if not source_key or not kickoff_iso or not home or not away:
        raise AvailabilityPayloadError("Game payload incomplete")
    if parse_kickoff(kickoff_iso) is None:
        raise AvailabilityPayloadError("Invalid kickoff ISO")

    return {
        "pin": pin,
        "player_name": player_name,
        "status": status,
        "game": {
            "source_key": source_key,
            "kickoff_iso": kickoff_iso,
            "home": home,
            "away": away,
            "venue": venue,
        },
    }
