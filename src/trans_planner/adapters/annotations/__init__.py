"""Leg annotation providers."""

from trans_planner.adapters.annotations.random_annotation_provider import (
    NoAnnotationProvider,
    RandomAnnotationProvider,
)

__all__ = ["NoAnnotationProvider", "RandomAnnotationProvider"]
