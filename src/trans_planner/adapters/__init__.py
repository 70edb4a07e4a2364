"""Adapters layer - external system integrations."""

from trans_planner.adapters.annotations import NoAnnotationProvider, RandomAnnotationProvider
from trans_planner.adapters.config import AppConfig
from trans_planner.adapters.location import FixedLocationPlatform
from trans_planner.adapters.transport_rest import TransportRestGateway

__all__ = [
    "AppConfig",
    "FixedLocationPlatform",
    "NoAnnotationProvider",
    "RandomAnnotationProvider",
    "TransportRestGateway",
]
