"""
Common utilities and infrastructure for the PROJ binding.

This package provides foundational components used across all modules:
- Configuration (library location, resource paths, strictness)
- Value types crossing the native boundary
- Unit registry for values read from PROJ
- Logging infrastructure
"""

from common.config import ProjConfig
from common.types import Coordinate, Locatable, BoundingBox
from common.units import ureg, Q_, to_quantity
from common.logging_config import get_logger, set_log_level

__all__ = [
    "ProjConfig",
    "Coordinate",
    "Locatable",
    "BoundingBox",
    "ureg",
    "Q_",
    "to_quantity",
    "get_logger",
    "set_log_level",
]
