"""
Unit Registry for Values Read from PROJ.

PROJ reports units as names taken from its database ("degree", "grad",
"metre", ...). This module maps those names onto the `pint` registry so
accessor results can be handed out as quantities.

Example Usage
-------------
>>> from common.units import to_quantity
>>> to_quantity(0.5, "degree").units
<Unit('degree')>
"""

from typing import Dict

import pint
from pint import UnitRegistry as PintUnitRegistry

ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity


# PROJ database unit names that pint spells differently
PROJ_UNIT_ALIASES: Dict[str, str] = {
    "metre": "meter",
    "grad": "gradian",
    "gon": "gradian",
    "arc-second": "arcsecond",
    "arc-minute": "arcminute",
    "US survey foot": "survey_foot",
    "kilometre": "kilometer",
    "centimetre": "centimeter",
    "millimetre": "millimeter",
}


def pint_unit_name(proj_unit: str) -> str:
    """Translate a PROJ unit name into a unit pint understands.

    Parameters
    ----------
    proj_unit : str
        Unit name as reported by PROJ.

    Returns
    -------
    str
        A unit expression accepted by `ureg`.
    """
    name = PROJ_UNIT_ALIASES.get(proj_unit, proj_unit)
    return name.replace(" ", "_")


def to_quantity(value: float, proj_unit: str) -> pint.Quantity:
    """Attach a PROJ unit to a value.

    Raises
    ------
    pint.UndefinedUnitError
        If the unit has no pint counterpart.
    """
    return ureg.Quantity(value, pint_unit_name(proj_unit))
