"""Head-to-head summary derived from football-data.org's head2head payload."""

RECENT_MEETINGS = 5


def _team_label(team: dict | None) -> str | None:
    if not team:
        return None
    return team.get("shortName") or team.get("name")


def _recent_meeting(match: dict) -> dict:
    score = match.get("score") or {}
    full_time = score.get("fullTime") or {}
    return {
        "date": match.get("utcDate"),
        "homeTeam": _team_label(match.get("homeTeam")),
        "awayTeam": _team_label(match.get("awayTeam")),
        "homeScore": full_time.get("home"),
        "awayScore": full_time.get("away"),
        "winner": score.get("winner"),
    }


def summarize_head_to_head(payload: dict | None) -> dict | None:
    """Win/draw/loss record and the most recent meetings, or None if the
    teams have never met.

    Draws are shared by both sides and each side's losses are the other
    side's wins, so the record is symmetric by construction.
    """
    if not payload:
        return None

    aggregates = payload.get("aggregates") or {}
    matches = payload.get("matches") or []
    total = aggregates.get("numberOfMatches") or len(matches)
    if not total:
        return None

    home = aggregates.get("homeTeam") or {}
    away = aggregates.get("awayTeam") or {}
    draws = aggregates.get("draws")
    if draws is None:
        draws = home.get("draws", 0)

    home_wins = home.get("wins", 0)
    away_wins = away.get("wins", 0)

    newest_first = sorted(matches, key=lambda m: m.get("utcDate") or "", reverse=True)

    return {
        "homeTeam": {
            "name": _team_label(home),
            "wins": home_wins,
            "draws": draws,
            "losses": away_wins,
        },
        "awayTeam": {
            "name": _team_label(away),
            "wins": away_wins,
            "draws": draws,
            "losses": home_wins,
        },
        "totalMatches": total,
        "recentMatches": [_recent_meeting(m) for m in newest_first[:RECENT_MEETINGS]],
    }
