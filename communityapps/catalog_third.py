"""Manifests for the third part of the community app catalogue."""

from __future__ import annotations

from communityapps.manifest import Manifest

_APPS: tuple[dict[str, str], ...] = (
    {
        "id": "random-cats",
        "name": "Random Cats",
        "author": "mrrobot245",
        "summary": "Shows pictures of cats",
        "desc": (
            "Shows random pictures/gifs of cats. Powered by Cat as a Service "
            "(cataas.com)."
        ),
        "file_name": "random_cats.star",
        "package_name": "randomcats",
    },
    {
        "id": "random-slackmoji",
        "name": "Random Slackmoji",
        "author": "btjones",
        "summary": "Displays a random Slackmoji",
        "desc": "Displays a random image from slackmojis.com!",
        "file_name": "random_slackmoji.star",
        "package_name": "randomslackmoji",
    },
    {
        "id": "reddit-images",
        "name": "Reddit Images",
        "author": "Nicole Brooks",
        "summary": "Shuffle Subreddit Images",
        "desc": (
            "Description: Show a random image post from a custom list of "
            "subreddits (up to 10) and/or a list of default subreddits. Use the ID "
            "displayed to access the post on a computer, at "
            "http://www.reddit.com/{id}. All fields are optional."
        ),
        "file_name": "reddit_images.star",
        "package_name": "redditimages",
    },
    {
        "id": "reddit-r-place",
        "name": "Reddit R-Place",
        "author": "funkfinger",
        "summary": "Bits of r/place",
        "desc": "See tidbits of what Redditors created for r/place.",
        "file_name": "reddit_r_place.star",
        "package_name": "redditrplace",
    },
    {
        "id": "roblox",
        "name": "Roblox",
        "author": "Chad Milburn / CODESTRONG",
        "summary": "Online friends & games",
        "desc": "Real time views of your Roblox experiences.",
        "file_name": "roblox.star",
        "package_name": "roblox",
    },
    {
        "id": "sbb-timetable",
        "name": "SBB Timetable",
        "author": "LukiLeu",
        "summary": "SBB Timetable",
        "desc": (
            "Shows a timetable for a station in the Swiss Public Transport network."
        ),
        "file_name": "sbb_timetable.star",
        "package_name": "sbbtimetable",
    },
    {
        "id": "severewxalertsusa",
        "name": "SevereWxAlertsUSA",
        "author": "aschechter88",
        "summary": "Display US Severe Wx Alerts",
        "desc": (
            "Show Severe Weather Alerts in your location issued by the US "
            "National Weather Service."
        ),
        "file_name": "severewxalertsusa.star",
        "package_name": "severewxalertsusa",
    },
    {
        "id": "sf-next-muni",
        "name": "SF Next Muni",
        "author": "Martin Strauss",
        "summary": "SF Muni arrival times",
        "desc": (
            "Shows the predicted arrival times from NextBus for a given SF Muni stop."
        ),
        "file_name": "sf_next_muni.star",
        "package_name": "sfnextmuni",
    },
    {
        "id": "shopify-chart",
        "name": "Shopify Chart",
        "author": "kcharwood",
        "summary": "Display daily ecomm metrics",
        "desc": (
            "Display daily Shopify metrics and charts for revenue, orders, or units."
        ),
        "file_name": "shopify_chart.star",
        "package_name": "shopifychart",
    },
    {
        "id": "shuffle-images",
        "name": "Shuffle Images",
        "author": "rs7q5",
        "summary": "Randomly display an image",
        "desc": "Randomly displays an image from a user-specified list.",
        "file_name": "shuffle_images.star",
        "package_name": "shuffleimages",
    },
    {
        "id": "snyk",
        "name": "Snyk",
        "author": "Andrew Powell",
        "summary": "Snyk project issue counts",
        "desc": (
            "Shows medium/high/critical issue counts for the configured Snyk project."
        ),
        "file_name": "snyk.star",
        "package_name": "snyk",
    },
    {
        "id": "sound-transit",
        "name": "Sound Transit",
        "author": "Jon Janzen",
        "summary": "Seattle light rail times",
        "desc": (
            "Shows upcoming arrivals at up to 2 different stations in Sound "
            "Transit's Link light rail system in Seattle."
        ),
        "file_name": "sound_transit.star",
        "package_name": "soundtransit",
    },
    {
        "id": "sports-rankings",
        "name": "Sports Rankings",
        "author": "Derek Holevinsky",
        "summary": "Shows rankings for sports",
        "desc": (
            "Shows the AP poll rankings for various sports. Currently supports "
            "college football and men's and women's college basketball."
        ),
        "file_name": "sports_rankings.star",
        "package_name": "sportsrankings",
    },
    {
        "id": "sports-scores",
        "name": "Sports Scores",
        "author": "rs7q5",
        "summary": "Get daily sports scores",
        "desc": (
            "Get daily scores or live updates of sports. Scores for the previous "
            "day are shown until 11am ET."
        ),
        "file_name": "sports_scores.star",
        "package_name": "sportsscores",
    },
    {
        "id": "sports-standings",
        "name": "Sports Standings",
        "author": "rs7q5",
        "summary": "Get sports standings",
        "desc": "Get various sports standings (data courtesy of ESPN).",
        "file_name": "sports_standings.star",
        "package_name": "sportsstandings",
    },
    {
        "id": "spotthestation",
        "name": "SpotTheStation",
        "author": "Robert Ison",
        "summary": "Next ISS visit overhead",
        "desc": "Enter your spotthestation.nasa.gov location's RSS Feed URL.",
        "file_name": "spotthestation.star",
        "package_name": "spotthestation",
    },
    {
        "id": "state-flags",
        "name": "State Flags",
        "author": "Robert Ison",
        "summary": "State Flags",
        "desc": "Displays state flags.",
        "file_name": "state_flags.star",
        "package_name": "stateflags",
    },
    {
        "id": "steam",
        "name": "Steam",
        "author": "Jeremy Tavener",
        "summary": "Steam Now Playing",
        "desc": (
            "Displays current game or previous games. Use https://steamid.xyz/ "
            "to find your 17 digit Steam ID."
        ),
        "file_name": "steam.star",
        "package_name": "steam",
    },
    {
        "id": "step-counter",
        "name": "Step Counter",
        "author": "Matt-Pesce",
        "summary": "Tracks Daily Step Progress",
        "desc": (
            "Fetches your Step Data from Google Fit, Reports progress versus "
            "daily goal."
        ),
        "file_name": "stepcounter.star",
        "package_name": "stepcounter",
    },
    {
        "id": "stock-ticker",
        "name": "Stock Ticker",
        "author": "Matt Holloway",
        "summary": "3 stocks scrolling",
        "desc": (
            "This is a simple stock ticker app, that will display a stock ticker "
            "for 3 stock symbols.  If you want more, spin up a second copy of the "
            "app to have more stocks tick. Requires a free API key from "
            "alphavantage.co."
        ),
        "file_name": "stock_ticker.star",
        "package_name": "stockticker",
    },
    {
        "id": "strava",
        "name": "Strava",
        "author": "Rob Kimball",
        "summary": "Displays athlete stats",
        "desc": "Displays your YTD or all-time athlete stats recorded on Strava.",
        "file_name": "strava.star",
        "package_name": "strava",
    },
    {
        "id": "subreddit",
        "name": "Subreddit",
        "author": "Petros Fytilis",
        "summary": "Subreddit post",
        "desc": "Display the #1 post of a subreddit.",
        "file_name": "subreddit.star",
        "package_name": "subreddit",
    },
    {
        "id": "sunrise-sunset",
        "name": "Sunrise Sunset",
        "author": "Alan Fleming",
        "summary": "Shows sunrise and set times",
        "desc": "Displays with icon sunrise and sunset times.",
        "file_name": "sunrise_sunset.star",
        "package_name": "sunrisesunset",
    },
    {
        "id": "super-mario-kart",
        "name": "Super Mario Kart",
        "author": "Kevin Connell",
        "summary": "Super Mario Kart Animation",
        "desc": "Animated characters & items from the 1992 Super Mario Kart game.",
        "file_name": "super_mario_kart.star",
        "package_name": "supermariokart",
    },
    {
        "id": "surf-forecast",
        "name": "Surf Forecast",
        "author": "smith-kyle",
        "summary": "Daily surf forecast",
        "desc": "Daily surf forecast for any spot on Surfline.",
        "file_name": "surf_forecast.star",
        "package_name": "surfforecast",
    },
    {
        "id": "surflive",
        "name": "Surflive",
        "author": "Rémi Carton",
        "summary": "Live surf conditions",
        "desc": "Shows the current surf conditions for a surf spot.",
        "file_name": "surflive.star",
        "package_name": "surflive",
    },
    {
        "id": "tartan",
        "name": "Tartan",
        "author": "dinosaursrarr",
        "summary": "Weaves tartans to look at",
        "desc": (
            "Renders a tartan based on thread count instructions and displays "
            "it on screen."
        ),
        "file_name": "tartan.star",
        "package_name": "tartan",
    },
)


def manifests() -> list[Manifest]:
    """Return fresh manifests for the apps in this part of the catalogue."""
    return [Manifest(**fields) for fields in _APPS]