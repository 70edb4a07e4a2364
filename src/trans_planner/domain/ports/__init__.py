"""Ports (interfaces) for the ports-and-adapters architecture."""

from trans_planner.domain.ports.location_platform import LocationPlatform
from trans_planner.domain.ports.transit_gateway import TransitGateway

__all__ = [
    "LocationPlatform",
    "TransitGateway",
]
