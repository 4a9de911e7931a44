"""
KitchenOPS package

Station-based kitchen operations: dishes and their recipes, per-station
ingredient stock, a shared backup reserve and a station manager that works
through a FIFO queue of orders. The domain objects, the orchestration core,
data loading and console views live in separate subpackages.
"""

__all__ = ["core", "domain", "data", "ui"]
