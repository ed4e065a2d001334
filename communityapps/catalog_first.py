"""Manifests for the first part of the community app catalogue."""

from __future__ import annotations

from communityapps.manifest import Manifest

_APPS: tuple[dict[str, str], ...] = (
    {
        "id": "ifparank",
        "name": "IFPARank",
        "author": "cubsaaron",
        "summary": "Display IFPA Ranking",
        "desc": "Display an International Flipper Pinball Association (IFPA) World Ranking.",
        "file_name": "ifparank.star",
        "package_name": "ifparank",
    },
    {
        "id": "indego-stations",
        "name": "Indego Stations",
        "author": "RayPatt",
        "summary": "Indego station availability",
        "desc": (
            "The user selects an Indego (Philadelphia bike share) station and Tidbyt "
            "will regularly display the number of regular and electric bikes available."
        ),
        "file_name": "indego_stations.star",
        "package_name": "indegostations",
    },
    {
        "id": "is-it-christmas",
        "name": "Is It Christmas",
        "author": "Austin Fonacier",
        "summary": "Is it christmas: yes/no",
        "desc": "Is it christmas: yes/no.",
        "file_name": "is_it_christmas.star",
        "package_name": "isitchristmas",
    },
    {
        "id": "islamic-prayer",
        "name": "Islamic Prayer",
        "author": "Austin Fonacier",
        "summary": "Islamic prayer times",
        "desc": "Islamic prayer times for the day.",
        "file_name": "islamic_prayer.star",
        "package_name": "islamicprayer",
    },
    {
        "id": "iss-tracker",
        "name": "ISS Tracker",
        "author": "Chris Jones (@IPv6Freely)",
        "summary": "Tracks the ISS Position",
        "desc": (
            "Tracks the position of the International Space Station using "
            "LAT/LONG coordinates."
        ),
        "file_name": "iss_tracker.star",
        "package_name": "isstracker",
    },
    {
        "id": "jokes-jokeapi",
        "name": "Jokes JokeAPI",
        "author": "rs7q5",
        "summary": "Displays jokes from JokeAPI",
        "desc": "Displays different jokes from JokeAPI.",
        "file_name": "jokes_jokeapi.star",
        "package_name": "jokesjokeapi",
    },
    {
        "id": "kickstarter",
        "name": "Kickstarter",
        "author": "sethvargo",
        "summary": "Kickstarter project status",
        "desc": (
            "Display the total amount raised and the number of backers for a "
            "Kickstarter project. The project must be publicly visible."
        ),
        "file_name": "kickstarter.star",
        "package_name": "kickstarter",
    },
    {
        "id": "kiel-ferry",
        "name": "Kiel Ferry",
        "author": "hloeding",
        "summary": "Kiel Ferry Departures",
        "desc": (
            "Next scheduled ferry departure time for any stop and direction in the "
            "Kiel harbor ferry system."
        ),
        "file_name": "kiel_ferry.star",
        "package_name": "kielferry",
    },
    {
        "id": "launchcountdown",
        "name": "LaunchCountdown",
        "author": "Robert Ison",
        "summary": "Displays next world launch",
        "desc": "Displays the next rocket launch in the world.",
        "file_name": "launchcountdown.star",
        "package_name": "launchcountdown",
    },
    {
        "id": "life",
        "name": "Life",
        "author": "dinosaursrarr",
        "summary": "Conways Game of Life",
        "desc": "Runs a famous cellular automaton and animates the state on screen.",
        "file_name": "life.star",
        "package_name": "life",
    },
    {
        "id": "lirr",
        "name": "LIRR",
        "author": "bralax",
        "summary": "LIRR Train Times",
        "desc": "Long Island Railroad Train Times.",
        "file_name": "lirr.star",
        "package_name": "lirr",
    },
    {
        "id": "london-bus-stop",
        "name": "London Bus Stop",
        "author": "dinosaursrarr",
        "summary": "Upcoming arrivals",
        "desc": "Shows upcoming arrivals at a specific bus stop in London.",
        "file_name": "london_bus_stop.star",
        "package_name": "londonbusstop",
    },
    {
        "id": "mbta",
        "name": "MBTA",
        "author": "Marcus Better",
        "summary": "MBTA departures",
        "desc": "MBTA bus and rail departure times.",
        "file_name": "mbta.star",
        "package_name": "mbta",
    },
    {
        "id": "mbta-new-trains",
        "name": "MBTA New Trains",
        "author": "joshspicer",
        "summary": "Track new MBTA subway cars",
        "desc": "Displays the real time location of the new MBTA subway cars.",
        "file_name": "mbta_new_trains.star",
        "package_name": "mbtanewtrains",
    },
    {
        "id": "metar",
        "name": "METAR",
        "author": "Alexander Valys",
        "summary": "METAR text and flight rules",
        "desc": (
            "Show METAR text for one airport or flight category (VFR/IFR/etc.) "
            "for up to 15 airports."
        ),
        "file_name": "metar.star",
        "package_name": "metar",
    },
    {
        "id": "mind-the-gap",
        "name": "Mind The Gap",
        "author": "dinosaursrarr",
        "summary": "Tube platform simulator",
        "desc": "Important advice for Londoners to remember at all times.",
        "file_name": "mind_the_gap.star",
        "package_name": "mindthegap",
    },
    {
        "id": "mlb-leaders",
        "name": "MLB Leaders",
        "author": "rs7q5",
        "summary": "Get MLB league leaders",
        "desc": (
            "Get the top 2 (3 stats) or 3 (1 stat) league leaders in various "
            "MLB stats."
        ),
        "file_name": "mlb_leaders.star",
        "package_name": "mlbleaders",
    },
    {
        "id": "mlb-scores",
        "name": "MLB Scores",
        "author": "LunchBox8484",
        "summary": "MLB baseball scores",
        "desc": (
            "For slower scrolling of scores, add the app to your Tidbyt multiple "
            "times. Then, within each app instance, set 'Total Instances of App' to "
            "the amount of times you have it installed, and set 'App Instance "
            "Number' unique to each app instance."
        ),
        "file_name": "mlb_scores.star",
        "package_name": "mlbscores",
    },
    {
        "id": "mlb-standings",
        "name": "MLB Standings",
        "author": "LunchBox8484",
        "summary": "MLB baseball standings",
        "desc": "View MLB standings by division.",
        "file_name": "mlb_standings.star",
        "package_name": "mlbstandings",
    },
    {
        "id": "mls-scores",
        "name": "MLS Scores",
        "author": "LunchBox8484",
        "summary": "MLS soccer scores",
        "desc": (
            "For slower scrolling of scores, add the app to your Tidbyt multiple "
            "times. Then, within each app instance, set 'Total Instances of App' to "
            "the amount of times you have it installed, and set 'App Instance "
            "Number' unique to each app instance."
        ),
        "file_name": "mls_scores.star",
        "package_name": "mlsscores",
    },
    {
        "id": "mn-light-rail",
        "name": "MN Light Rail",
        "author": "Alex Miller",
        "summary": "Train Departure Times",
        "desc": "Shows Light Rail Departure Times from Selected Stop.",
        "file_name": "mn_light_rail.star",
        "package_name": "mnlightrail",
    },
)


def manifests() -> list[Manifest]:
    """Return fresh manifests for the apps in this part of the catalogue."""
    return [Manifest(**fields) for fields in _APPS]