"""
Mapping Layer

Pure conversions between API schemas and ORM entities.
"""

from .job_mapper import to_entity, to_view, to_views

__all__ = [
    "to_entity",
    "to_view",
    "to_views",
]
