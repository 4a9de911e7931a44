"""
Core package for KitchenOPS.

Exposes the station manager, which orchestrates stations, the backup
reserve and the dish queue, and the report models of a batch run.
"""

from .manager import StationManager
from .results import BatchReport, DishOutcome, StationAttempt

__all__ = ["StationManager", "BatchReport", "DishOutcome", "StationAttempt"]
