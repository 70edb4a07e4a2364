"""Constants for the transport.rest adapter.

Uses the public v6.db.transport.rest API (no authentication required).
API Documentation: https://v6.db.transport.rest/api.html
"""

DEFAULT_BASE_URL = "https://v6.db.transport.rest"

LOCATIONS_PATH = "/locations"  # GET /locations?query=...
NEARBY_STOPS_PATH = "/stops/nearby"  # GET /stops/nearby?latitude=...&longitude=...
JOURNEYS_PATH = "/journeys"  # GET /journeys?from=...&to=...

DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# Location record types that can be used as journey endpoints
STATION_TYPES = frozenset({"station", "stop"})

# Only the best itinerary is ever shown
JOURNEY_RESULTS = 1
