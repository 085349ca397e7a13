"""
Value Types for the PROJ Binding.

This module defines the plain-Python values that cross the binding
boundary. They carry no native resources: a `Coordinate` is copied into a
native record for every call and copied back only when the call succeeds.

Design Rationale
----------------
Coordinates are mutable so that a successful transformation can update the
caller's object in place, the way a native coordinate record is overwritten.
Every native call works on a copy, so a failed call never touches the
caller's value.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple

import numpy as np


class Locatable(ABC):
    """Anything that carries a location a coordinate operation can update."""

    @abstractmethod
    def location(self) -> 'Coordinate':
        """Return a copy of the current location."""
        pass

    @abstractmethod
    def set_location(self, coordinate: 'Coordinate') -> None:
        """Replace the current location."""
        pass


@dataclass
class Coordinate(Locatable):
    """A coordinate of up to four components.

    The meaning of the components depends on the operation it is fed to:
    longitude/latitude (radians for proj-string operations, degrees for
    operations between two reference systems), easting/northing, or
    geocentric X/Y/Z.

    Attributes
    ----------
    x, y : float
        First two components.
    z : float, optional
        Third component, height or Z. Default is 0.
    t : float, optional
        Time component (decimal year). Default is infinity, which PROJ
        reads as "no time".

    Examples
    --------
    >>> c = Coordinate.from_degrees(12.0, 55.0)
    >>> lon, lat = c.to_degrees()
    >>> round(lon, 6), round(lat, 6)
    (12.0, 55.0)
    """
    x: float
    y: float
    z: float = 0.0
    t: float = math.inf

    def __post_init__(self):
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)
        self.t = float(self.t)

    def copy(self) -> 'Coordinate':
        return Coordinate(self.x, self.y, self.z, self.t)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.t)

    def location(self) -> 'Coordinate':
        return self.copy()

    def set_location(self, coordinate: 'Coordinate') -> None:
        self.x, self.y, self.z, self.t = coordinate.as_tuple()

    def to_degrees(self) -> Tuple[float, float]:
        """Convert the first two components from radians to degrees.

        Returns
        -------
        Tuple[float, float]
            (x_degrees, y_degrees)
        """
        return float(np.degrees(self.x)), float(np.degrees(self.y))

    @classmethod
    def from_degrees(
        cls,
        lon_deg: float,
        lat_deg: float,
        z: float = 0.0,
        t: float = math.inf
    ) -> 'Coordinate':
        """Create a coordinate whose angular components are stored in radians.

        Parameters
        ----------
        lon_deg : float
            Longitude in degrees.
        lat_deg : float
            Latitude in degrees.
        z : float, optional
            Height in meters.
        t : float, optional
            Time in decimal years.

        Returns
        -------
        Coordinate
            Coordinate with radian x/y, as proj-string operations expect.
        """
        return cls(float(np.radians(lon_deg)), float(np.radians(lat_deg)), z, t)


@dataclass(frozen=True)
class BoundingBox:
    """A geographic bounding box in degrees.

    Attributes
    ----------
    west, south, east, north : float
        Bounds in degrees. ``west`` may be greater than ``east`` for a box
        crossing the antimeridian.
    """
    west: float
    south: float
    east: float
    north: float

    def __post_init__(self):
        """Validate latitude bounds."""
        for value, label in ((self.south, "south"), (self.north, "north")):
            if not -90.0 <= value <= 90.0:
                raise ValueError(f"{label} latitude {value} out of range [-90, 90]")
        if self.south > self.north:
            raise ValueError(
                f"south latitude {self.south} is greater than north latitude {self.north}"
            )

    @property
    def crosses_antimeridian(self) -> bool:
        return self.west > self.east
