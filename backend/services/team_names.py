"""Short club names → the names Guardian articles actually use.

football-data.org and the frontend use abbreviated club names ("Man City",
"Wolverhampton") while Guardian copy uses the names fans and reporters use
("Manchester City", "Wolves"), so a literal search on the short name
under-matches. The first variant is the preferred name. Clubs whose short
name is already what the Guardian prints (Arsenal, Chelsea, Burnley, ...)
are not listed.
"""

TEAM_NAME_VARIANTS: dict[str, list[str]] = {
    "Aston Villa": ["Aston Villa", "Villa"],
    "Brighton Hove": ["Brighton", "Brighton & Hove Albion", "Brighton Hove"],
    "Crystal Palace": ["Crystal Palace", "Palace"],
    "Ipswich Town": ["Ipswich", "Ipswich Town"],
    "Leeds United": ["Leeds", "Leeds United"],
    "Leicester City": ["Leicester", "Leicester City"],
    "Man City": ["Manchester City", "Man City"],
    "Man United": ["Manchester United", "Man Utd", "Man United"],
    "Newcastle": ["Newcastle", "Newcastle United"],
    "Nottingham": ["Nottingham Forest", "Forest", "Nottingham"],
    "Tottenham": ["Tottenham", "Spurs", "Tottenham Hotspur"],
    "West Ham": ["West Ham", "West Ham United"],
    "Wolverhampton": ["Wolves", "Wolverhampton Wanderers", "Wolverhampton"],
}


def variants_for(short_name: str) -> list[str]:
    """Ordered name variants for a club, never empty.

    Unknown clubs fall back to the name as supplied.
    """
    variants = TEAM_NAME_VARIANTS.get(short_name)
    if not variants:
        return [short_name]
    return list(variants)
