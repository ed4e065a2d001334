"""Manifests for the second part of the community app catalogue."""

from __future__ import annotations

from communityapps.manifest import Manifest

_SCORES_DESC = (
    "For slower scrolling of scores, add the app to your Tidbyt multiple "
    "times. Then, within each app instance, set 'Total Instances of App' to "
    "the amount of times you have it installed, and set 'App Instance "
    "Number' unique to each app instance."
)

_APPS: tuple[dict[str, str], ...] = (
    {
        "id": "moretransit",
        "name": "MoreTransit",
        "author": "gdcolella",
        "summary": "See next transit arrivals",
        "desc": (
            "See next transit arrivals from TransSee. Optimized for NYC Subway "
            "and more customizable than the default apps."
        ),
        "file_name": "moretransit.star",
        "package_name": "moretransit",
    },
    {
        "id": "movie-quotes",
        "name": "Movie Quotes",
        "author": "Austin Fonacier",
        "summary": "Random Movie Quotes",
        "desc": "Random movie quote from AFI top 100 movie quotes.",
        "file_name": "movie_quotes.star",
        "package_name": "moviequotes",
    },
    {
        "id": "natdex",
        "name": "National Pokedex",
        "author": "Lauren Kopac",
        "summary": "Display random Pokemon",
        "desc": "Display a random Pokemon from your region of choice.",
        "file_name": "natdex.star",
        "package_name": "natdex",
    },
    {
        "id": "nationaltoday",
        "name": "NationalToday",
        "author": "rs7q5",
        "summary": "Get NationalToday holidays",
        "desc": "Displays today's holidays from NationalToday.",
        "file_name": "nationaltoday.star",
        "package_name": "nationaltoday",
    },
    {
        "id": "nba-scores",
        "name": "NBA Scores",
        "author": "LunchBox8484",
        "summary": "NBA basketball scores",
        "desc": _SCORES_DESC,
        "file_name": "nba_scores.star",
        "package_name": "nbascores",
    },
    {
        "id": "ncaaf-scores",
        "name": "NCAAF Scores",
        "author": "LunchBox8484",
        "summary": "NCAAF football scores",
        "desc": _SCORES_DESC,
        "file_name": "ncaaf_scores.star",
        "package_name": "ncaafscores",
    },
    {
        "id": "ncaaf-standings",
        "name": "NCAAF Standings",
        "author": "LunchBox8484",
        "summary": "NCAAF football standings",
        "desc": "View NCAAF standings by conference.",
        "file_name": "ncaaf_standings.star",
        "package_name": "ncaafstandings",
    },
    {
        "id": "near-earth-objs",
        "name": "Near Earth Objs",
        "author": "noahcolvin",
        "summary": "Show next near earth object",
        "desc": (
            "Displays the name, speed, distance, and arrival of the next near "
            "Earth object from NeoWs."
        ),
        "file_name": "near_earth_objs.star",
        "package_name": "nearearthobjs",
    },
    {
        "id": "netatmo",
        "name": "Netatmo",
        "author": "danmcclain",
        "summary": "Weather from your Netatmo",
        "desc": "Get your current weather from your Netatmo weather station.",
        "file_name": "netatmo.star",
        "package_name": "netatmo",
    },
    {
        "id": "nfl-scores",
        "name": "NFL Scores",
        "author": "LunchBox8484",
        "summary": "NFL football scores",
        "desc": _SCORES_DESC,
        "file_name": "nfl_scores.star",
        "package_name": "nflscores",
    },
    {
        "id": "nfl-standings",
        "name": "NFL Standings",
        "author": "LunchBox8484",
        "summary": "NFL football standings",
        "desc": "View NFL standings by division.",
        "file_name": "nfl_standings.star",
        "package_name": "nflstandings",
    },
    {
        "id": "nft",
        "name": "NFT",
        "author": "nipterink",
        "summary": "Random Opensea NFT",
        "desc": "Displays a random NFT associated with an Ethereum public address.",
        "file_name": "nft.star",
        "package_name": "nft",
    },
    {
        "id": "nhl-live",
        "name": "NHL Live",
        "author": "Reed Arneson",
        "summary": "Live updates of NHL games",
        "desc": "Displays live game stats or next scheduled NHL game information.",
        "file_name": "nhl_live.star",
        "package_name": "nhllive",
    },
    {
        "id": "nhl-next-game",
        "name": "NHL Next Game",
        "author": "AKKanMan",
        "summary": "Gets Next Game Info",
        "desc": "Gets info on preferred NHL teams next game.",
        "file_name": "nhl_next_game.star",
        "package_name": "nhlnextgame",
    },
    {
        "id": "nhl-scores",
        "name": "NHL Scores",
        "author": "LunchBox8484",
        "summary": "NHL hockey scores",
        "desc": _SCORES_DESC,
        "file_name": "nhl_scores.star",
        "package_name": "nhlscores",
    },
    {
        "id": "nightscout",
        "name": "Nightscout",
        "author": "Jeremy Tavener",
        "summary": "Shows Nightscout CGM Data",
        "desc": (
            "Displays Continuous Glucose Monitoring (CGM) data from the "
            "Nightscout Open Source project (https://nightscout.github.io/)."
        ),
        "file_name": "nightscout.star",
        "package_name": "nightscout",
    },
    {
        "id": "nixel-clock",
        "name": "Nixel Clock",
        "author": "Olly Stedall @saltedlolly",
        "summary": "A Pixel Nixie Clock",
        "desc": "Nixie Tube Clock + Pixels = Nixel Clock!",
        "file_name": "nixel_clock.star",
        "package_name": "nixelclock",
    },
    {
        "id": "noaa-buoy",
        "name": "NOAA Buoy",
        "author": "tavdog",
        "summary": "Show buoy swell info",
        "desc": (
            "Display swell data for user specified buoy. Find buoy_id's here : "
            "https://www.ndbc.noaa.gov/obs.shtml Buoy must have "
            "height,period,direction to display correctly."
        ),
        "file_name": "noaa_buoy.star",
        "package_name": "noaabuoy",
    },
    {
        "id": "noaa-tides",
        "name": "NOAA Tides",
        "author": "tavdog",
        "summary": "Display NOAA Tides",
        "desc": "Display daily tides from NOAA stations.",
        "file_name": "noaa_tides.star",
        "package_name": "noaatides",
    },
    {
        "id": "nyan-cat",
        "name": "Nyan Cat",
        "author": "Mack Ward",
        "summary": "Nyan Cat Animation",
        "desc": "An animated cartoon cat with a Pop-Tart for a torso.",
        "file_name": "nyan_cat.star",
        "package_name": "nyancat",
    },
    {
        "id": "nyc-bus",
        "name": "NYC Bus",
        "author": "samandmoore",
        "summary": "NYC Bus departures",
        "desc": "Real time bus departures for your preferred stop.",
        "file_name": "nyc_bus.star",
        "package_name": "nycbus",
    },
    {
        "id": "ogs-games-viewer",
        "name": "OGS Games Viewer",
        "author": "Neal Wright",
        "summary": "Shows OGS Games",
        "desc": (
            "Shows a visualization of currently active Go games on OGS "
            "(Online Go Server) for a given user."
        ),
        "file_name": "ogs_games_viewer.star",
        "package_name": "ogsgamesviewer",
    },
    {
        "id": "oh-highway-signs",
        "name": "OH Highway Signs",
        "author": "noahcolvin",
        "summary": "Displays OH highway signs",
        "desc": "Displays messages from overhead signs on Ohio highways.",
        "file_name": "oh_highway_signs.star",
        "package_name": "ohhighwaysigns",
    },
    {
        "id": "pagerduty",
        "name": "PagerDuty",
        "author": "Nick Penree",
        "summary": "Show PagerDuty stats",
        "desc": "Show PagerDuty incident stats and on-call status.",
        "file_name": "pagerduty.star",
        "package_name": "pagerduty",
    },
    {
        "id": "path-train-schedule",
        "name": "Path Schedule",
        "author": "Todd Greenberg",
        "summary": "Schedule for path train",
        "desc": (
            "Shows train arrivals for upcoming inbound and outbound trains at "
            "path train stations."
        ),
        "file_name": "path_train_schedule.star",
        "package_name": "pathtrainschedule",
    },
    {
        "id": "petpikachu",
        "name": "Pet Pikachu",
        "author": "Kyle Stark",
        "summary": "Virtual pet Pikachu",
        "desc": "Based on the Pokémon Pikachu virtual pet from the 90s.",
        "file_name": "petpikachu.star",
        "package_name": "petpikachu",
    },
    {
        "id": "phase-of-moon",
        "name": "Phase Of Moon",
        "author": "Alan Fleming",
        "summary": "Shows the phase of the moon",
        "desc": "Shows the current phase of the moon.",
        "file_name": "phase_of_moon.star",
        "package_name": "phaseofmoon",
    },
    {
        "id": "pokedex",
        "name": "Pokedex",
        "author": "Mack Ward",
        "summary": "Display a random Pokemon",
        "desc": (
            "Display a random Pokemon alongside its name, number, height, "
            "and weight."
        ),
        "file_name": "pokedex.star",
        "package_name": "pokedex",
    },
    {
        "id": "pollen-count",
        "name": "Pollen Count",
        "author": "Nicole Brooks",
        "summary": "Pollen count for your area",
        "desc": (
            "Displays a pollen count for your area. Enter your location for "
            "updates every 12 hours on the current conditions in your town, as "
            "well as which types of pollen are in the air today."
        ),
        "file_name": "pollen_count.star",
        "package_name": "pollencount",
    },
    {
        "id": "powerball",
        "name": "PowerBall",
        "author": "AmillionAir",
        "summary": "Shows Powerball Numbers",
        "desc": "Shows up to date powerball numbers and next drawing.",
        "file_name": "powerball.star",
        "package_name": "powerball",
    },
    {
        "id": "precious-metals",
        "name": "Precious Metals",
        "author": "threeio",
        "summary": "Quotes on precious metals",
        "desc": "Quotes for gold, platinum and silver.",
        "file_name": "precious_metals.star",
        "package_name": "preciousmetals",
    },
    {
        "id": "pubg-stats",
        "name": "PUBG Stats",
        "author": "joes-io",
        "summary": "Shows PUBG Player Stats",
        "desc": (
            "Displays individual player's gaming stats from PlayerUnknown's "
            "Battlegrounds."
        ),
        "file_name": "pubg_stats.star",
        "package_name": "pubgstats",
    },
    {
        "id": "pulsechain",
        "name": "PulseChain",
        "author": "bretep",
        "summary": "Price of PLS and PLSX",
        "desc": (
            "Display the price of PLS and PLSX. Choose between testnet and "
            "mainnet prices. After PulseChain mainnet launch, an update will be "
            "pushed to this app to display the correct mainnet price."
        ),
        "file_name": "pulsechain.star",
        "package_name": "pulsechain",
    },
    {
        "id": "purpleair",
        "name": "PurpleAir",
        "author": "posburn",
        "summary": "Displays local air quality",
        "desc": (
            "Displays the local air quality index from a nearby PurpleAir "
            "sensor. Choose a sensor close to you or provide a specific sensor id."
        ),
        "file_name": "purpleair.star",
        "package_name": "purpleair",
    },
)


def manifests() -> list[Manifest]:
    """Return fresh manifests for the apps in this part of the catalogue."""
    return [Manifest(**fields) for fields in _APPS]