"""
Catalog data for reducer calculations.

Material catalogs (gear grade and general grade), the rolling bearing
catalog, standard series and parallel key bands. Bearing selection lives in
helixcalc.catalog.matcher.
"""

from helixcalc.catalog.models import (
    BearingCatalogEntry,
    BearingKind,
    DrivenLoad,
    Keyway,
    Material,
    MaterialCategory,
    PrimeMover,
)
from helixcalc.catalog.data import (
    BEARING_CATALOG,
    find_bearing,
    get_material,
    material_names,
)
from helixcalc.catalog.loader import load_bearing_catalog, dump_bearing_catalog

__all__ = [
    "BearingCatalogEntry",
    "BearingKind",
    "DrivenLoad",
    "Keyway",
    "Material",
    "MaterialCategory",
    "PrimeMover",
    "BEARING_CATALOG",
    "find_bearing",
    "get_material",
    "material_names",
    "load_bearing_catalog",
    "dump_bearing_catalog",
]
