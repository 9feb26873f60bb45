"""
Availability services module.

Business logic for fixture availability, kept apart from HTTP handling in
views.
"""

# Legacy source key reconciliation
from .legacy_keys import (
    clean_input,
    parse_source_key,
    parse_kickoff,
    build_legacy_iso_candidates,
    find_matching_game_ids,
    find_existing_game_id,
)

# Payload validation
from .validation import (
    AvailabilityPayloadError,
    parse_set_availability_payload,
)

# Availability reads and writes
from .availability import (
    get_player_status,
    get_names_by_status,
    get_status_counts,
    record_availability,
)

# Grade data
from .grade import (
    get_grade_data,
)

__all__ = [
    # Legacy source key reconciliation
    "clean_input",
    "parse_source_key",
    "parse_kickoff",
    "build_legacy_iso_candidates",
    "find_matching_game_ids",
    "find_existing_game_id",

    # Payload validation
    "AvailabilityPayloadError",
    "parse_set_availability_payload",

    # Availability reads and writes
    "get_player_status",
    "get_names_by_status",
    "get_status_counts",
    "record_availability",

    # Grade data
    "get_grade_data",
]
