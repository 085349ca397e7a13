"""
C Structures and Opaque Pointer Types of ``proj.h``.

Opaque native objects are declared as empty structures so that each handle
kind gets a distinct pointer type; a NULL pointer of any of them is falsy.

``PJ_COORD`` is a union of four doubles in C. It is declared here as a
structure holding one ``double[4]``: the layout and calling convention are
identical and ctypes cannot pass unions by value.
"""

from ctypes import (
    POINTER,
    Structure,
    c_char_p,
    c_double,
    c_int,
    c_size_t,
)


class PJ(Structure):
    pass


class PJ_CONTEXT(Structure):
    pass


class PJ_AREA(Structure):
    pass


class PJ_OBJ_LIST(Structure):
    pass


class PJ_OPERATION_FACTORY_CONTEXT(Structure):
    pass


PJ_p = POINTER(PJ)
PJ_CONTEXT_p = POINTER(PJ_CONTEXT)
PJ_AREA_p = POINTER(PJ_AREA)
PJ_OBJ_LIST_p = POINTER(PJ_OBJ_LIST)
PJ_OPERATION_FACTORY_CONTEXT_p = POINTER(PJ_OPERATION_FACTORY_CONTEXT)

# char ** (PROJ_STRING_LIST and NULL-terminated option arrays)
PROJ_STRING_LIST = POINTER(c_char_p)


class PJ_COORD(Structure):
    _fields_ = [("v", c_double * 4)]

    @classmethod
    def from_values(cls, x: float, y: float, z: float, t: float) -> 'PJ_COORD':
        coord = cls()
        coord.v[0] = x
        coord.v[1] = y
        coord.v[2] = z
        coord.v[3] = t
        return coord

    def values(self):
        return (self.v[0], self.v[1], self.v[2], self.v[3])


class PJ_FACTORS(Structure):
    _fields_ = [
        ("meridional_scale", c_double),
        ("parallel_scale", c_double),
        ("areal_scale", c_double),
        ("angular_distortion", c_double),
        ("meridian_parallel_angle", c_double),
        ("meridian_convergence", c_double),
        ("tissot_semimajor", c_double),
        ("tissot_semiminor", c_double),
        ("dx_dlam", c_double),
        ("dx_dphi", c_double),
        ("dy_dlam", c_double),
        ("dy_dphi", c_double),
    ]


class PJ_PROJ_INFO(Structure):
    _fields_ = [
        ("id", c_char_p),
        ("description", c_char_p),
        ("definition", c_char_p),
        ("has_inverse", c_int),
        ("accuracy", c_double),
    ]


class PJ_INFO(Structure):
    _fields_ = [
        ("major", c_int),
        ("minor", c_int),
        ("patch", c_int),
        ("release", c_char_p),
        ("version", c_char_p),
        ("searchpath", c_char_p),
        ("paths", POINTER(c_char_p)),
        ("path_count", c_size_t),
    ]
