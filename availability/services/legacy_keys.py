"""
Legacy source key reconciliation.

Fixture rows are keyed by a ``kickoffISO|home|away`` source key. Older
writers serialized the kickoff timestamp differently (timezone shifted or
re-read as local wall-clock time), so a lookup by the current key can miss
rows that refer to the same match. These helpers expand a key into the
set of historical spellings and resolve them against the ``Game`` table.

The store handle (a ``Game`` manager or queryset) is always passed in by
the caller.
"""

from collections import namedtuple
from datetime import datetime, timedelta, timezone as dt_timezone
from zoneinfo import ZoneInfo

from django.conf import settings
from django.utils.dateparse import date_re, datetime_re, parse_date, parse_datetime


# Offsets (hours) that historical writers added or subtracted by mistake.
LEGACY_OFFSET_HOURS = (10, 11, -10, -11)

ParsedSourceKey = namedtuple("ParsedSourceKey", ["kickoff_iso", "home", "away"])


def clean_input(value):
    """Collapse runs of whitespace to a single space and trim the ends."""
    return " ".join(str(value or "").split())


def get_legacy_local_timezone():
    """Timezone the historical writer ran in (``LEGACY_KEY_LOCAL_TIMEZONE``, UTC by default)."""
    return ZoneInfo(getattr(settings, "LEGACY_KEY_LOCAL_TIMEZONE", "UTC"))


def parse_source_key(source_key):
    """Split a source key into kickoff, home and away, or None if it has fewer than 3 parts."""
    parts = source_key.split("|")
    if len(parts) < 3:
        return None

    return ParsedSourceKey(
        kickoff_iso=parts[0],
        home=clean_input(parts[1]),
        away=clean_input("|".join(parts[2:])),
    )


def parse_kickoff(value, local_tz=None):
    """
    Parse an ISO-8601 kickoff into an aware datetime, or None if it isn't one.

    Timestamps without an offset are read as wall-clock time in ``local_tz``;
    a bare date is midnight UTC.
    """
    if not isinstance(value, str):
        return None
    value = value.strip()
    if not value:
        return None

    try:
        # Extended YYYY-MM-DD[THH:MM[:SS[.fff]]][offset] only, no basic or week dates
        if date_re.match(value):
            day = parse_date(value)
            return datetime(day.year, day.month, day.day, tzinfo=dt_timezone.utc)
        if not datetime_re.match(value):
            return None
        moment = parse_datetime(value)
    except ValueError:
        # Well formed but not a real date, e.g. month 13
        return None

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=local_tz or get_legacy_local_timezone())

    try:
        moment.astimezone(dt_timezone.utc)
    except OverflowError:
        # The instant falls outside the representable UTC range
        return None
    return moment


def to_iso_z(moment):
    """Serialize as UTC with millisecond precision and a ``Z`` suffix, as stored in source keys."""
    utc = moment.astimezone(dt_timezone.utc).replace(tzinfo=None)
    return utc.isoformat(timespec="milliseconds") + "Z"


def _shift(moment, hours):
    try:
        return moment + timedelta(hours=hours)
    except OverflowError:
        return None


def _wall_clock_iso(utc, local_tz):
    rewalled = datetime(
        utc.year, utc.month, utc.day, utc.hour, utc.minute, utc.second,
        tzinfo=local_tz,
    )
    try:
        return to_iso_z(rewalled)
    except OverflowError:
        return None


def build_legacy_iso_candidates(kickoff_iso, local_tz=None):
    """
    Return the kickoff spellings a historical writer may have stored.

    The input itself is always the first element. When it parses as a
    timestamp the list also holds its canonical serialization, its UTC
    fields re-read as ``local_tz`` wall-clock time, and the instant shifted
    by each of ``LEGACY_OFFSET_HOURS``. Duplicates are dropped.
    """
    local_tz = local_tz or get_legacy_local_timezone()
    candidates = {kickoff_iso: None}

    moment = parse_kickoff(kickoff_iso, local_tz)
    if moment is None:
        return list(candidates)

    utc = moment.astimezone(dt_timezone.utc)
    candidates[to_iso_z(utc)] = None

    wall_clock = _wall_clock_iso(utc, local_tz)
    if wall_clock is not None:
        candidates[wall_clock] = None

    # Shifting in UTC keeps every serialized candidate in range
    for hours in LEGACY_OFFSET_HOURS:
        shifted = _shift(utc, hours)
        if shifted is not None:
            candidates[to_iso_z(shifted)] = None

    return list(candidates)


def build_candidate_source_keys(kickoff_iso, home, away, local_tz=None):
    """Source keys for every legacy kickoff candidate with normalized team names."""
    home = clean_input(home)
    away = clean_input(away)
    return [
        f"{iso}|{home}|{away}"
        for iso in build_legacy_iso_candidates(kickoff_iso, local_tz)
    ]


def find_matching_game_ids(games, source_key, local_tz=None):
    """
    Return the ids of every game row that may refer to ``source_key``.

    ``games`` is a ``Game`` manager or queryset. Database errors are not
    caught here; an unparseable key falls back to the exact match only.
    """
    ids = set(games.filter(source_key=source_key).values_list("id", flat=True))

    parsed = parse_source_key(source_key)
    if parsed is None:
        return ids

    candidate_keys = build_candidate_source_keys(
        parsed.kickoff_iso, parsed.home, parsed.away, local_tz
    )
    ids.update(
        games.filter(source_key__in=candidate_keys).values_list("id", flat=True)
    )
    return ids


def find_existing_game_id(games, source_key, kickoff_iso, home, away, local_tz=None):
    """
    Return the id of the game row to update for a write, or None.

    An exact ``source_key`` match always wins; otherwise the first row
    matching a legacy candidate key is returned.
    """
    exact_id = (
        games.filter(source_key=source_key)
        .order_by("id")
        .values_list("id", flat=True)
        .first()
    )
    if exact_id is not None:
        return exact_id

    candidate_keys = build_candidate_source_keys(kickoff_iso, home, away, local_tz)
    return (
        games.filter(source_key__in=candidate_keys)
        .order_by("id")
        .values_list("id", flat=True)
        .first()
    )
