"""
Summary: Placement feature exports.
Why: Give the organize service one import path for routing resolved files.
"""

from .domain.sanitizer import Sanitizer
from .usecases.path_builder import DestinationPlanner
from .usecases.placement_engine import PlacementEngine

__all__ = ["DestinationPlanner", "PlacementEngine", "Sanitizer"]
