"""
Enumeration Values of ``proj.h``.

Only the values the binding passes to or reads from the library are listed.
"""

from typing import Final


# PJ_CATEGORY
PJ_CATEGORY_ELLIPSOID: Final = 0
PJ_CATEGORY_PRIME_MERIDIAN: Final = 1
PJ_CATEGORY_DATUM: Final = 2
PJ_CATEGORY_CRS: Final = 3
PJ_CATEGORY_COORDINATE_OPERATION: Final = 4
PJ_CATEGORY_DATUM_ENSEMBLE: Final = 5

# PJ_GUESSED_WKT_DIALECT
PJ_GUESSED_WKT2_2019: Final = 0
PJ_GUESSED_WKT2_2015: Final = 1
PJ_GUESSED_WKT1_GDAL: Final = 2
PJ_GUESSED_WKT1_ESRI: Final = 3
PJ_GUESSED_NOT_WKT: Final = 4

# PJ_DIRECTION
PJ_FWD: Final = 1
PJ_IDENT: Final = 0
PJ_INV: Final = -1

# PJ_WKT_TYPE
PJ_WKT2_2015: Final = 0
PJ_WKT2_2015_SIMPLIFIED: Final = 1
PJ_WKT2_2019: Final = 2
PJ_WKT2_2019_SIMPLIFIED: Final = 3
PJ_WKT1_GDAL: Final = 4
PJ_WKT1_ESRI: Final = 5

# PJ_PROJ_STRING_TYPE
PJ_PROJ_5: Final = 0
PJ_PROJ_4: Final = 1

# Oldest major release exposing proj_context_errno_string
MINIMUM_PROJ_MAJOR: Final = 8
