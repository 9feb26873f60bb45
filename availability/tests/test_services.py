from datetime import datetime, timezone as dt_timezone

from django.test import TestCase, override_settings

from availability.models import Availability, Game, Player
from availability.services import (
    AvailabilityPayloadError,
    get_names_by_status,
    get_player_status,
    get_status_counts,
    parse_set_availability_payload,
    record_availability,
)

KICKOFF_ISO = "2026-03-01T10:00:00.000Z"
SOURCE_KEY = f"{KICKOFF_ISO}|Briars 3|Macquarie Uni 2"
LEGACY_KEY = "2026-03-01T21:00:00.000Z|Briars 3|Macquarie Uni 2"


def make_payload(**overrides):
    payload = {
        "pin": "briars2026",
        "player_name": "Sam Smith",
        "status": "yes",
        "game": {
            "source_key": SOURCE_KEY,
            "kickoff_iso": KICKOFF_ISO,
            "home": "Briars 3",
            "away": "Macquarie Uni 2",
            "venue": "Homebush",
        },
    }
    payload.update(overrides)
    return payload


@override_settings(LEGACY_KEY_LOCAL_TIMEZONE="UTC")
class AvailabilityReadTests(TestCase):
    def setUp(self):
        kickoff = datetime(2026, 3, 1, 10, tzinfo=dt_timezone.utc)
        self.game = Game.objects.create(
            source_key=SOURCE_KEY, kickoff_at=kickoff, home="Briars 3", away="Macquarie Uni 2"
        )
        self.legacy_game = Game.objects.create(
            source_key=LEGACY_KEY, kickoff_at=kickoff, home="Briars 3", away="Macquarie Uni 2"
        )
        self.other_game = Game.objects.create(
            source_key="2026-03-08T10:00:00.000Z|Briars 3|Penrith",
            kickoff_at=kickoff,
            home="Briars 3",
            away="Penrith",
        )
        self.alice = Player.objects.create(name="alice")
        self.bob = Player.objects.create(name="Bob")
        self.cara = Player.objects.create(name="Cara")

        Availability.objects.create(game=self.game, player=self.bob, status="yes")
        Availability.objects.create(game=self.legacy_game, player=self.alice, status="yes")
        Availability.objects.create(game=self.legacy_game, player=self.bob, status="yes")
        Availability.objects.create(game=self.game, player=self.cara, status="maybe")
        Availability.objects.create(game=self.other_game, player=self.cara, status="no")

    def test_counts_include_legacy_rows(self):
        self.assertEqual(get_status_counts(SOURCE_KEY), {"yes": 3, "no": 0, "maybe": 1})

    def test_counts_for_unknown_fixture(self):
        self.assertEqual(
            get_status_counts("2027-01-01T00:00:00.000Z|X|Y"), {"yes": 0, "no": 0, "maybe": 0}
        )

    def test_names_are_deduplicated_and_sorted(self):
        names = get_names_by_status(SOURCE_KEY)
        self.assertEqual(names, {"yes": ["alice", "Bob"], "maybe": ["Cara"], "no": []})

    def test_names_for_unknown_fixture(self):
        self.assertEqual(get_names_by_status("garbage"), {"yes": [], "maybe": [], "no": []})

    def test_player_status(self):
        self.assertEqual(get_player_status(SOURCE_KEY, "Cara"), "maybe")
        self.assertEqual(get_player_status(SOURCE_KEY, "  alice "), "yes")

    def test_player_status_unknown_player_or_short_name(self):
        self.assertIsNone(get_player_status(SOURCE_KEY, "Nobody"))
        with self.assertNumQueries(0):
            self.assertIsNone(get_player_status(SOURCE_KEY, "a"))

    def test_player_status_without_answer(self):
        Player.objects.create(name="Dana")
        self.assertIsNone(get_player_status(SOURCE_KEY, "Dana"))


@override_settings(LEGACY_KEY_LOCAL_TIMEZONE="UTC")
class RecordAvailabilityTests(TestCase):
    def test_creates_game_player_and_answer(self):
        saved = record_availability(make_payload())

        game = Game.objects.get()
        self.assertEqual(saved, {"status": "yes", "game_id": game.id})
        self.assertEqual(game.source_key, SOURCE_KEY)
        self.assertEqual(game.kickoff_at, datetime(2026, 3, 1, 10, tzinfo=dt_timezone.utc))
        self.assertEqual(game.venue, "Homebush")
        answer = Availability.objects.get()
        self.assertEqual(answer.player.name, "Sam Smith")
        self.assertEqual(answer.status, "yes")

    def test_updates_existing_answer(self):
        record_availability(make_payload())
        record_availability(make_payload(status="no"))

        self.assertEqual(Game.objects.count(), 1)
        self.assertEqual(Player.objects.count(), 1)
        self.assertEqual(Availability.objects.get().status, "no")

    def test_reuses_and_refreshes_legacy_game(self):
        legacy = Game.objects.create(
            source_key=LEGACY_KEY,
            kickoff_at=datetime(2026, 3, 1, 21, tzinfo=dt_timezone.utc),
            home="Briars 3",
            away="Macquarie Uni 2",
        )

        saved = record_availability(make_payload(status="maybe"))

        self.assertEqual(saved["game_id"], legacy.id)
        self.assertEqual(Game.objects.count(), 1)
        legacy.refresh_from_db()
        self.assertEqual(legacy.source_key, SOURCE_KEY)
        self.assertEqual(legacy.kickoff_at, datetime(2026, 3, 1, 10, tzinfo=dt_timezone.utc))
        self.assertEqual(legacy.venue, "Homebush")
        self.assertEqual(get_player_status(SOURCE_KEY, "Sam Smith"), "maybe")


class ParseSetAvailabilityPayloadTests(TestCase):
    def make_raw(self, **overrides):
        raw = {
            "pin": " briars2026 ",
            "playerName": "  Sam   Smith ",
            "status": "maybe",
            "game": {
                "source_key": f" {SOURCE_KEY} ",
                "kickoff_iso": KICKOFF_ISO,
                "home": "Briars  3",
                "away": "Macquarie Uni 2",
                "venue": None,
            },
        }
        raw.update(overrides)
        return raw

    def assertPayloadError(self, raw, message):
        with self.assertRaisesMessage(AvailabilityPayloadError, message):
            parse_set_availability_payload(raw)

    def test_valid_payload_is_normalized(self):
        payload = parse_set_availability_payload(self.make_raw())
        self.assertEqual(payload["pin"], "briars2026")
        self.assertEqual(payload["player_name"], "Sam Smith")
        self.assertEqual(payload["status"], "maybe")
        self.assertEqual(
            payload["game"],
            {
                "source_key": SOURCE_KEY,
                "kickoff_iso": KICKOFF_ISO,
                "home": "Briars 3",
                "away": "Macquarie Uni 2",
                "venue": None,
            },
        )

    def test_venue_is_cleaned(self):
        raw = self.make_raw()
        raw["game"]["venue"] = "  Sydney   Olympic Park "
        self.assertEqual(parse_set_availability_payload(raw)["game"]["venue"], "Sydney Olympic Park")

    def test_not_an_object(self):
        self.assertPayloadError(["pin"], "Invalid JSON body")

    def test_missing_pin(self):
        self.assertPayloadError(self.make_raw(pin="  "), "PIN required")

    def test_short_player_name(self):
        self.assertPayloadError(self.make_raw(playerName=" x "), "Player name required")
        self.assertPayloadError(self.make_raw(playerName=42), "Player name required")

    def test_invalid_status(self):
        self.assertPayloadError(self.make_raw(status="YES"), "Invalid status")

    def test_missing_game(self):
        self.assertPayloadError(self.make_raw(game="nope"), "Game payload incomplete")

    def test_incomplete_game(self):
        raw = self.make_raw()
        raw["game"]["away"] = "   "
        self.assertPayloadError(raw, "Game payload incomplete")

    def test_invalid_kickoff(self):
        raw = self.make_raw()
        raw["game"]["kickoff_iso"] = "next saturday"
        self.assertPayloadError(raw, "Invalid kickoff ISO")

    def test_basic_format_kickoff_is_invalid(self):
        for value in ("20260301", "20260301T100000Z", "2026-W09-7"):
            raw = self.make_raw()
            raw["game"]["kickoff_iso"] = value
            self.assertPayloadError(raw, "Invalid kickoff ISO")
