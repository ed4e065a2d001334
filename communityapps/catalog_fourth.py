"""Manifests for the fourth part of the community app catalogue."""

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
        "id": "tcat-bus-arrivals",
        "name": "TCAT Bus Arrivals",
        "author": "Harry Samuels",
        "summary": "Show TCAT arrival times",
        "desc": "Display Arrival Times for TCAT Ithaca Buses at a Specific Stop.",
        "file_name": "tcat_bus_arrivals.star",
        "package_name": "tcatbusarrivals",
    },
    {
        "id": "tempest",
        "name": "Tempest Weather",
        "author": "Rohan Singh",
        "summary": "Tempest weather station",
        "desc": "Show readings from your Tempest weather station.",
        "file_name": "tempest.star",
        "package_name": "tempest",
    },
    {
        "id": "teslafi",
        "name": "TeslaFi",
        "author": "mrrobot245",
        "summary": "Shows charge/name/range",
        "desc": (
            "Shows your Teslas current Name, Charge in Mi/KM and battery %. "
            "Also shows if its charging or not."
        ),
        "file_name": "teslafi.star",
        "package_name": "teslafi",
    },
    {
        "id": "test-patterns",
        "name": "Test Patterns",
        "author": "harrisonpage",
        "summary": "Pretty test patterns",
        "desc": "Test patterns are as old as TV broadcasts.",
        "file_name": "test_patterns.star",
        "package_name": "testpatterns",
    },
    {
        "id": "they-said-so",
        "name": "They Said So",
        "author": "Henry So, Jr.",
        "summary": "Quote of the Day",
        "desc": "Quote of the day powered by theysaidso.com.",
        "file_name": "they_said_so.star",
        "package_name": "theysaidso",
    },
    {
        "id": "tindie-sales",
        "name": "Tindie Sales",
        "author": "Joey Castillo",
        "summary": "Shows Tindie sales numbers",
        "desc": (
            "Tindie is an online marketplace for maker-made products. This app "
            "displays sales stats for your Tindie store."
        ),
        "file_name": "tindie_sales.star",
        "package_name": "tindiesales",
    },
    {
        "id": "todoist",
        "name": "Todoist",
        "author": "zephyern",
        "summary": "Integration with Todoist",
        "desc": "Shows the number of tasks you have due today.",
        "file_name": "todoist.star",
        "package_name": "todoist",
    },
    {
        "id": "todoist-next",
        "name": "Todoist Next",
        "author": "Alisdair/Akeslo",
        "summary": "Todoist next due/overdue",
        "desc": "Displays the next due or overdue task from todoist.",
        "file_name": "todoist_next.star",
        "package_name": "todoistnext",
    },
    {
        "id": "traffic",
        "name": "Traffic",
        "author": "Rob Kimball",
        "summary": "Time to your destination",
        "desc": (
            "Shows your estimated travel duration using traffic information "
            "from Bing/MapQuest."
        ),
        "file_name": "traffic.star",
        "package_name": "traffic",
    },
    {
        "id": "transsee",
        "name": "TransSee",
        "author": "[email]",
        "summary": "Realtime transit prediction",
        "desc": (
            "Provides real-time transit predictions based on actual travel times "
            "for over 150 agencies. Requires paid premium. See transsee.ca/tidbyt "
            "for usage information."
        ),
        "file_name": "transsee.star",
        "package_name": "transsee",
    },
    {
        "id": "tube",
        "name": "Tube",
        "author": "dinosaursrarr",
        "summary": "London Underground arrivals",
        "desc": "Upcoming arrivals for a particular Tube station.",
        "file_name": "tube.star",
        "package_name": "tube",
    },
    {
        "id": "tube-status",
        "name": "Tube Status",
        "author": "dinosaursrarr",
        "summary": "Current status from TfL",
        "desc": (
            "Shows the current status of each line on London Underground and "
            "other TfL services."
        ),
        "file_name": "tube_status.star",
        "package_name": "tubestatus",
    },
    {
        "id": "tv-quotes",
        "name": "TV Quotes",
        "author": "rs7q5",
        "summary": "Display Television Quotes",
        "desc": "Displays Television Quotes.",
        "file_name": "tv_quotes.star",
        "package_name": "tvquotes",
    },
    {
        "id": "twitch",
        "name": "Twitch",
        "author": "Nick Penree",
        "summary": "Display info from Twitch",
        "desc": "Display info for a Twitch username.",
        "file_name": "twitch.star",
        "package_name": "twitch",
    },
    {
        "id": "twitter-follows",
        "name": "Twitter Follows",
        "author": "Nick Penree",
        "summary": "Twitter Follower Count",
        "desc": "Display the follower count for a provided screen name.",
        "file_name": "twitter_follows.star",
        "package_name": "twitterfollows",
    },
    {
        "id": "unsplash",
        "name": "Unsplash",
        "author": "zephyern",
        "summary": "Shows random photos",
        "desc": "Displays a random image from Unsplash.",
        "file_name": "unsplash.star",
        "package_name": "unsplash",
    },
    {
        "id": "usgs-earthquakes",
        "name": "USGS Earthquakes",
        "author": "Chris Silverberg",
        "summary": "Recent nearby earthquakes",
        "desc": "Displays the most recent earthquakes based on location.",
        "file_name": "usgs_earthquakes.star",
        "package_name": "usgsearthquakes",
    },
    {
        "id": "us-yield-curve",
        "name": "US Yield Curve",
        "author": "Rob Kimball",
        "summary": "Plots the US yield curve",
        "desc": (
            "Track changes to the yield curve over different US Treasury "
            "maturities."
        ),
        "file_name": "us_yield_curve.star",
        "package_name": "usyieldcurve",
    },
    {
        "id": "verge-taglines",
        "name": "Verge Taglines",
        "author": "@joevgreathead",
        "summary": "The Verge's latest tagline",
        "desc": (
            "Displays the latest tagline from the top of popular tech news site "
            "The Verge (dot com)."
        ),
        "file_name": "verge_taglines.star",
        "package_name": "vergetaglines",
    },
    {
        "id": "vertical-message",
        "name": "Vertical Message",
        "author": "rs7q5",
        "summary": "Display messages vertically",
        "desc": "Display a message vertically.",
        "file_name": "vertical_message.star",
        "package_name": "verticalmessage",
    },
    {
        "id": "wantedposter",
        "name": "WantedPoster",
        "author": "Robert Ison",
        "summary": "Display Wanted Poster",
        "desc": "Displays a custom wanted poster based on an image you upload.",
        "file_name": "wantedposter.star",
        "package_name": "wantedposter",
    },
    {
        "id": "warframe-cycles",
        "name": "Warframe Cycles",
        "author": "grantmatheny",
        "summary": "Time in Warframe open areas",
        "desc": (
            "Tells you the cycle that's active in each of the Warframe open areas "
            "and in Earth missions."
        ),
        "file_name": "warframe_cycles.star",
        "package_name": "warframecycles",
    },
    {
        "id": "weather-map",
        "name": "Weather Map",
        "author": "Felix Bruns",
        "summary": "Weather Map",
        "desc": (
            "Display real-time precipitation radar for a location. Powered by the "
            "RainViewer API."
        ),
        "file_name": "weather_map.star",
        "package_name": "weathermap",
    },
    {
        "id": "web-3-counter",
        "name": "Web 3 Counter",
        "author": "Nick Kuzmik (github.com/kuzmik)",
        "summary": "Expose web3 as a scam",
        "desc": (
            "Displays the total dollar value of lost assets due to various crypto "
            "scams, rugpulls, and crashes. Data comes from web3isgoinggreat.com, "
            "which is very tongue-in-cheek."
        ),
        "file_name": "web_3_counter.star",
        "package_name": "web3counter",
    },
    {
        "id": "whosthatpokemon",
        "name": "WhosThatPokemon?",
        "author": "Nicole Brooks",
        "summary": "Pokemon Quiz Game",
        "desc": (
            "Test your Pokemon Master knowledge with this rendition of \"Who's "
            "That Pokemon?\". Turn off classic mode to crank up the difficulty. "
            "Set your Tidbyt speed to ensure the animation takes up exactly half "
            "the time is has displayed."
        ),
        "file_name": "whosthatpokemon.star",
        "package_name": "whosthatpokemon",
    },
    {
        "id": "wifi-qr-code",
        "name": "WiFi QR Code",
        "author": "misusage",
        "summary": "Creates a WiFi QR code",
        "desc": (
            "This app creates a scannable WiFi QR code. It is not compatible with "
            "Enterprise networks. Since there are display limitations with the "
            "Tidbyt, not all networks will be able to be encoded. Simply scan the "
            "QR code and your phone will join the WiFi network."
        ),
        "file_name": "wifi_qr_code.star",
        "package_name": "wifiqrcode",
    },
    {
        "id": "wnba-scores",
        "name": "WNBA Scores",
        "author": "LunchBox8484",
        "summary": "WNBA basketball scores",
        "desc": _SCORES_DESC,
        "file_name": "wnba_scores.star",
        "package_name": "wnbascores",
    },
    {
        "id": "wordlebyt",
        "name": "Wordlebyt",
        "author": "skola28",
        "summary": "Display daily Wordle score",
        "desc": (
            "After playing Wordle on your phone, click Share>Copy text. In the "
            "Tidbyt app, paste the result into Wordlebyt."
        ),
        "file_name": "wordlebyt.star",
        "package_name": "wordlebyt",
    },
    {
        "id": "word-of-the-day",
        "name": "Word Of The Day",
        "author": "greg-n",
        "summary": "Shows the Word Of The Day",
        "desc": "Displays the Merriam-Webster Word Of The Day.",
        "file_name": "word_of_the_day.star",
        "package_name": "wordoftheday",
    },
    {
        "id": "world-clock",
        "name": "World Clock",
        "author": "Elliot Bentley",
        "summary": "Multi timezone clock",
        "desc": "Displays the time in up to three different locations.",
        "file_name": "world_clock.star",
        "package_name": "worldclock",
    },
)


def manifests() -> list[Manifest]:
    """Return fresh manifests for the apps in this part of the catalogue."""
    return [Manifest(**fields) for fields in _APPS]