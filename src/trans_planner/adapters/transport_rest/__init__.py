"""transport.rest adapters (DB, VBB and compatible HAFAS REST instances)."""

from trans_planner.adapters.transport_rest.http_client import TransportRestHttpClient
from trans_planner.adapters.transport_rest.transport_rest_gateway import TransportRestGateway

__all__ = ["TransportRestGateway", "TransportRestHttpClient"]
