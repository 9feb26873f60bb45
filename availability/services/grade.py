"""
Grade (competition) data for the fixtures page: ladder, matches and teams.
"""

from availability.models import LadderEntry, Match, Team


def _isoformat(value):
    return value.isoformat() if value else None


def serialize_ladder_entry(entry):
    return {
        "season": entry.season,
        "team_key": entry.team_key,
        "position": entry.position,
        "played": entry.played,
        "wins": entry.wins,
        "draws": entry.draws,
        "losses": entry.losses,
        "gf": entry.gf,
        "ga": entry.ga,
        "gd": entry.gd,
        "points": entry.points,
        "as_of": _isoformat(entry.as_of),
    }


def serialize_match(match):
    return {
        "season": match.season,
        "round_label": match.round_label,
        "kickoff_at": _isoformat(match.kickoff_at),
        "venue": match.venue,
        "home_team_key": match.home_team_key,
        "away_team_key": match.away_team_key,
        "home_score": match.home_score,
        "away_score": match.away_score,
        "source_hash": match.source_hash,
        "updated_at": _isoformat(match.updated_at),
    }


def get_grade_data(season):
    """Ladder (by position), matches (by kickoff) and the team name map for a season."""
    ladder = LadderEntry.objects.filter(season=season).order_by("position")
    matches = Match.objects.filter(season=season).order_by("kickoff_at")
    teams = Team.objects.all()

    return {
        "season": season,
        "ladder": [serialize_ladder_entry(entry) for entry in ladder],
        "matches": [serialize_match(match) for match in matches],
        "teams": [
            {
                "team_key": team.team_key,
                "name_full": team.name_full,
                "short_name": team.short_name,
            }
            for team in teams
        ],
    }
