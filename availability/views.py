import logging
import json
from django.conf import settings
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt

from availability.decorators import require_get, require_source_key
from availability.services import (
    # Availability reads and writes
    get_player_status,
    get_names_by_status,
    get_status_counts,
    record_availability,

    # Payload validation
    AvailabilityPayloadError,
    parse_set_availability_payload,

    # Grade data
    get_grade_data,
)

logger = logging.getLogger(__name__)


def server_error(message):
    return JsonResponse({"ok": False, "error": message or "Server error"}, status=500)


@require_get
@require_source_key
def my_status_endpoint(request, source_key):
    """API endpoint reporting the status one player recorded for a fixture."""
    try:
        status = get_player_status(source_key, request.GET.get("playerName", ""))
        return JsonResponse({"ok": True, "status": status})
    except Exception as e:
        logger.exception(f"Error reading player status for {source_key!r}")
        return server_error(str(e))


@require_get
@require_source_key
def names_endpoint(request, source_key):
    """API endpoint listing player names by status for a fixture."""
    try:
        names = get_names_by_status(source_key)
        return JsonResponse({"ok": True, "names": names})
    except Exception as e:
        logger.exception(f"Error listing availability names for {source_key!r}")
        return server_error(str(e))


@require_get
@require_source_key
def summary_endpoint(request, source_key):
    """API endpoint counting yes/no/maybe answers for a fixture."""
    try:
        counts = get_status_counts(source_key)
        return JsonResponse({"ok": True, "counts": counts})
    except Exception as e:
        logger.exception(f"Error counting availability for {source_key!r}")
        return server_error(str(e))


@csrf_exempt
def set_availability_endpoint(request):
    """API endpoint recording a player's status; guarded by the team PIN."""
    if request.method != "POST":
        return JsonResponse({"ok": False, "error": "Method not allowed"}, status=405)

    try:
        raw = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return JsonResponse({"ok": False, "error": "Invalid JSON"}, status=400)

    try:
        payload = parse_set_availability_payload(raw)
    except AvailabilityPayloadError as e:
        return JsonResponse({"ok": False, "error": str(e)}, status=400)

    if payload["pin"] != settings.TEAM_PIN:
        logger.warning(f"Wrong PIN for availability update by {payload['player_name']!r}")
        return JsonResponse({"ok": False, "error": "Wrong PIN"}, status=401)

    try:
        saved = record_availability(payload)
        return JsonResponse({"ok": True, "saved": {"status": saved["status"]}})
    except Exception as e:
        logger.exception(
            f"Error saving availability for {payload['game']['source_key']!r}"
        )
        return server_error(str(e))


@require_get
def grade_data_endpoint(request):
    """API endpoint returning the ladder, matches and teams for the current season."""
    try:
        data = get_grade_data(settings.CURRENT_SEASON)
        return JsonResponse({"ok": True, **data})
    except Exception as e:
        logger.exception("Error loading grade data")
        return server_error(str(e))
