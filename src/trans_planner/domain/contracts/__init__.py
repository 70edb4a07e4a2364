"""Contracts (protocols) between application components."""

from trans_planner.domain.contracts.annotation_provider import AnnotationProviderProtocol
from trans_planner.domain.contracts.search_resetter import SearchResetterProtocol

__all__ = [
    "AnnotationProviderProtocol",
    "SearchResetterProtocol",
]
