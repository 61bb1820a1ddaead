"""
Built-in catalogs and standard series.

Material data follows the DIN tables used in German machine-element hand
calculation (Roloff/Matek style). Bearing data is SKF catalog data; rows
that carry limiting speeds come from the grease/oil speed table and take
precedence over the plain load-rating rows for the same designation.

Everything here is immutable and built once at import.
"""

from typing import Optional, Sequence

from helixcalc.catalog.models import (
    BearingCatalogEntry,
    BearingKind,
    Keyway,
    Material,
    MaterialCategory,
)
from helixcalc.errors import UnknownMaterialError


def _gear(name, sigma_k, sigma_ak, sigma_d, e, g, hb, phd) -> Material:
    return Material(
        name=name,
        category=MaterialCategory.GEAR,
        ultimate_strength_mpa=sigma_k,
        yield_strength_mpa=sigma_ak,
        durability_limit_mpa=sigma_d,
        elastic_modulus_mpa=e,
        shear_modulus_mpa=g,
        hardness_hb=hb,
        surface_pressure_mpa=phd,
    )


def _general(name, sigma_k, sigma_ak, e, g, hb, poisson) -> Material:
    return Material(
        name=name,
        category=MaterialCategory.GENERAL,
        ultimate_strength_mpa=sigma_k,
        yield_strength_mpa=sigma_ak,
        elastic_modulus_mpa=e,
        shear_modulus_mpa=g,
        hardness_hb=hb,
        poisson=poisson,
    )


# =============================================================================
# Gear materials
# =============================================================================

GEAR_MATERIALS: tuple[Material, ...] = (
    # Structural steels
    _gear("DIN 17 100, St 50", 540, 290, 216, 211000, 81000, 160, 352),
    _gear("DIN 17 100, St 60", 650, 330, 260, 211000, 81000, 195, 429),
    _gear("DIN 17 100, St 70", 770, 360, 308, 211000, 81000, 205, 451),
    # Cast iron and cast steel
    _gear("DIN 1693, GGG 70", 700, 440, 210, 172000, 67200, 300, 600),
    _gear("DIN 1681, GS 38", 380, 200, 133, 205000, 79000, 100, 200),
    _gear("DIN 1681, GS 45", 450, 230, 158, 205000, 79000, 125, 250),
    _gear("DIN 1681, GS 52", 520, 260, 182, 205000, 79000, 150, 300),
    _gear("DIN 1681, GS 60", 600, 300, 210, 205000, 79000, 175, 350),
    # Quenched and tempered steels
    _gear("DIN 17 200, Ck 35", 565, 275, 226, 211000, 81000, 183, 366),
    _gear("DIN 17 200, Ck 45", 700, 420, 350, 211000, 81000, 205, 410),
    _gear("DIN 17 200, Ck 55", 740, 500, 296, 211000, 81000, 229, 458),
    _gear("DIN 17 200, Ck 60", 860, 520, 344, 211000, 81000, 241, 482),
    _gear("DIN 17 200, 28 Mn 6", 780, 490, 312, 211000, 81000, 223, 446),
    _gear("DIN 17 200, 38 Cr 2", 775, 450, 310, 211000, 81000, 207, 414),
    _gear("DIN 17 200, 46 Cr 2", 875, 550, 350, 211000, 81000, 223, 446),
    _gear("DIN 17 200, 34 Cr 4", 875, 590, 350, 211000, 81000, 223, 446),
    _gear("DIN 17 200, 37 Cr 4", 925, 630, 370, 211000, 81000, 235, 470),
    _gear("DIN 17 200, 41 Cr 4", 1000, 660, 400, 211000, 81000, 241, 482),
    _gear("DIN 17 200, 25 CrMo 4", 875, 600, 350, 211000, 81000, 212, 424),
    _gear("DIN 17 200, 34 CrMo 4", 1000, 650, 400, 211000, 81000, 223, 446),
    _gear("DIN 17 200, 42 CrMo 4", 1100, 750, 550, 211000, 81000, 241, 482),
    _gear("DIN 17 200, 50 CrMo 4", 1100, 780, 550, 211000, 81000, 248, 496),
    _gear("DIN 17 200, 50 CrV 4", 1100, 800, 550, 211000, 81000, 248, 496),
    # Case hardening steels
    _gear("DIN 17 210, 17 Cr 3", 785, 440, 314, 211000, 81000, 174, 348),
    _gear("DIN 17 210, 20 Cr 4", 830, 440, 332, 211000, 81000, 197, 394),
    _gear("DIN 17 210, 16 MnCr 5", 880, 440, 352, 211000, 81000, 207, 414),
    _gear("DIN 17 210, 20 MnCr 5", 1130, 540, 452, 211000, 81000, 217, 434),
    _gear("DIN 17 210, 20 MoCr 4", 930, 590, 372, 211000, 81000, 207, 414),
    _gear("DIN 17 210, 15 CrNi 6", 1030, 540, 412, 211000, 81000, 217, 434),
    _gear("DIN 17 210, 18 CrNi 8", 1180, 785, 472, 211000, 81000, 248, 496),
    _gear("DIN 17 440, 17 CrNiMo 6", 1200, 785, 480, 211000, 81000, 248, 496),
)


# =============================================================================
# General (shaft and housing) materials
# =============================================================================

GENERAL_MATERIALS: tuple[Material, ...] = (
    # Structural steels
    _general("DIN 17 100, St 33", 320, 180, 211000, 81000, 100, 0.3),
    _general("DIN 17 100, St 37", 360, 230, 211000, 81000, 120, 0.3),
    _general("DIN 17 100, St 44", 410, 275, 211000, 81000, 140, 0.3),
    _general("DIN 17 100, St 50", 490, 290, 211000, 81000, 160, 0.3),
    _general("DIN 17 100, St 52", 510, 350, 211000, 81000, 200, 0.3),
    _general("DIN 17 100, St 60", 590, 330, 211000, 81000, 195, 0.3),
    _general("DIN 17 100, St 70", 690, 360, 211000, 81000, 205, 0.3),
    # Grey cast iron
    _general("DIN 1691, GG 15", 150, 150, 100000, 40000, 205, 0.26),
    _general("DIN 1691, GG 20", 200, 200, 100000, 40000, 230, 0.26),
    _general("DIN 1691, GG 25", 250, 250, 100000, 40000, 250, 0.26),
    _general("DIN 1691, GG 30", 300, 300, 100000, 40000, 275, 0.26),
    _general("DIN 1691, GG 35", 315, 315, 100000, 40000, 285, 0.26),
    _general("DIN 1691, GG 40", 400, 400, 100000, 40000, 310, 0.26),
    # Spheroidal graphite iron
    _general("DIN 1693, GGG 40", 400, 250, 172000, 67200, 180, 0.28),
    _general("DIN 1693, GGG 50", 500, 350, 172000, 67200, 240, 0.28),
    _general("DIN 1693, GGG 60", 600, 420, 172000, 67200, 260, 0.28),
    _general("DIN 1693, GGG 70", 700, 500, 172000, 67200, 300, 0.28),
    # Cast steel
    _general("DIN 1681, GS 38", 380, 190, 205000, 79000, 150, 0.3),
    _general("DIN 1681, GS 45", 450, 230, 205000, 79000, 150, 0.3),
    _general("DIN 1681, GS 52", 520, 260, 205000, 79000, 150, 0.3),
    _general("DIN 1681, GS 60", 600, 300, 205000, 79000, 150, 0.3),
    _general("DIN 1681, GS 70", 700, 350, 205000, 79000, 150, 0.3),
    # Quenched and tempered steels
    _general("DIN 17 200, Ck 25", 490, 290, 211000, 81000, 155, 0.3),
    _general("DIN 17 200, Ck 35", 540, 320, 211000, 81000, 183, 0.3),
    _general("DIN 17 200, Ck 45", 620, 370, 211000, 81000, 205, 0.3),
    _general("DIN 17 200, Ck 55", 660, 420, 211000, 81000, 229, 0.3),
    _general("DIN 17 200, Ck 60", 740, 450, 211000, 81000, 241, 0.3),
    _general("DIN 17 200, 28 Mn 6", 690, 490, 211000, 81000, 223, 0.3),
    _general("DIN 17 200, 38 Cr 2", 700, 450, 211000, 81000, 207, 0.3),
    _general("DIN 17 200, 46 Cr 2", 800, 550, 211000, 81000, 223, 0.3),
    _general("DIN 17 200, 34 Cr 4", 800, 590, 211000, 81000, 223, 0.3),
    _general("DIN 17 200, 37 Cr 4", 850, 630, 211000, 81000, 235, 0.3),
    _general("DIN 17 200, 41 Cr 4", 690, 460, 211000, 81000, 241, 0.3),
    # Chromium-molybdenum alloys
    _general("DIN 17 200, 25 CrMo 4", 690, 460, 211000, 81000, 212, 0.3),
    _general("DIN 17 200, 34 CrMo 4", 800, 590, 211000, 81000, 223, 0.3),
    _general("DIN 17 200, 42 CrMo 4", 880, 630, 211000, 81000, 241, 0.3),
    _general("DIN 17 200, 50 CrMo 4", 880, 680, 211000, 81000, 248, 0.3),
    _general("DIN 17 200, 50 CrV 4", 1000, 800, 211000, 81000, 248, 0.3),
    _general("DIN 17 200, 36 CrNiMo 4", 1000, 800, 211000, 81000, 248, 0.3),
    _general("DIN 17 200, 34 CrNiMo 4", 1100, 900, 211000, 81000, 248, 0.3),
    _general("DIN 17 200, 30 CrNiMo 8", 1250, 920, 211000, 81000, 248, 0.3),
    # Case hardening steels
    _general("DIN 17 210, Ck 10", 490, 300, 211000, 81000, 131, 0.3),
    _general("DIN 17 210, Ck 15", 590, 360, 211000, 81000, 143, 0.3),
    _general("DIN 17 210, 17 Cr 3", 690, 440, 211000, 81000, 174, 0.3),
    _general("DIN 17 210, 20 Cr 4", 730, 440, 211000, 81000, 197, 0.3),
    _general("DIN 17 210, 16 MnCr 5", 780, 440, 211000, 81000, 207, 0.3),
    _general("DIN 17 210, 20 MnCr 5", 980, 540, 211000, 81000, 217, 0.3),
    _general("DIN 17 210, 20 MoCr 4", 780, 590, 211000, 81000, 207, 0.3),
)


MATERIALS_BY_CATEGORY: dict[MaterialCategory, dict[str, Material]] = {
    MaterialCategory.GEAR: {m.name: m for m in GEAR_MATERIALS},
    MaterialCategory.GENERAL: {m.name: m for m in GENERAL_MATERIALS},
}


# =============================================================================
# Rolling bearings
# =============================================================================

def _bearing(designation, d, big_d, b, c, c0, kind, grease=None, oil=None) -> BearingCatalogEntry:
    return BearingCatalogEntry(
        designation=designation,
        bore_mm=d,
        outer_diameter_mm=big_d,
        width_mm=b,
        dynamic_load_n=c,
        static_load_n=c0,
        kind=kind,
        limiting_speed_grease_rpm=grease,
        limiting_speed_oil_rpm=oil,
    )


_BALL = BearingKind.DEEP_GROOVE_BALL
_SELF_ALIGNING = BearingKind.SELF_ALIGNING_BALL
_ANGULAR = BearingKind.ANGULAR_CONTACT_BALL
_TAPERED = BearingKind.TAPERED_ROLLER
_CYLINDRICAL = BearingKind.CYLINDRICAL_ROLLER

# Rows with grease/oil limiting speeds
_SPEED_RATED_BEARINGS = (
    _bearing("6004", 20, 42, 12, 9400, 5000, _BALL, 19000, 24000),
    _bearing("6204", 20, 47, 14, 12800, 6600, _BALL, 17000, 22000),
    _bearing("6304", 20, 52, 15, 15900, 7800, _BALL, 16000, 19000),
    _bearing("6005", 25, 47, 12, 10100, 5850, _BALL, 16000, 20000),
    _bearing("6205", 25, 52, 15, 14000, 7800, _BALL, 15000, 18000),
    _bearing("6305", 25, 62, 17, 22500, 11600, _BALL, 13000, 16000),
    _bearing("6006", 30, 55, 13, 13200, 8300, _BALL, 14000, 17000),
    _bearing("6206", 30, 62, 16, 19500, 11200, _BALL, 12000, 15000),
    _bearing("6306", 30, 72, 19, 28100, 16000, _BALL, 11000, 13000),
    _bearing("6007", 35, 62, 14, 16000, 10300, _BALL, 12000, 15000),
    _bearing("6207", 35, 72, 17, 25500, 15300, _BALL, 10000, 13000),
    _bearing("6008", 40, 68, 15, 16800, 11500, _BALL, 11000, 13000),
    _bearing("6208", 40, 80, 18, 29100, 17900, _BALL, 9000, 11000),
    _bearing("6308", 40, 90, 23, 41000, 24000, _BALL, 8500, 10000),
    _bearing("6009", 45, 75, 16, 21000, 15100, _BALL, 9500, 12000),
    _bearing("6209", 45, 85, 19, 31500, 20500, _BALL, 8500, 10000),
    _bearing("6010", 50, 80, 16, 21800, 16600, _BALL, 9000, 11000),
    _bearing("6210", 50, 90, 20, 35100, 23200, _BALL, 7500, 9000),
    _bearing("6310", 50, 110, 27, 62000, 38000, _BALL, 7000, 8500),
    _bearing("NU 205", 25, 52, 15, 28600, 27000, _CYLINDRICAL, 11000, 14000),
    _bearing("NU 206", 30, 62, 16, 38000, 36500, _CYLINDRICAL, 9500, 12000),
    _bearing("NU 208", 40, 80, 18, 56000, 50000, _CYLINDRICAL, 7500, 9000),
    _bearing("NU 210", 50, 90, 20, 72000, 69000, _CYLINDRICAL, 6300, 7500),
)

# Rows with load ratings only
_LOAD_RATED_BEARINGS = (
    _bearing("6200", 10, 30, 9, 5070, 2360, _BALL),
    _bearing("6201", 12, 32, 10, 6890, 3100, _BALL),
    _bearing("6202", 15, 35, 11, 7800, 3750, _BALL),
    _bearing("6203", 17, 40, 12, 9560, 4750, _BALL),
    _bearing("6204", 20, 47, 14, 12800, 6650, _BALL),
    _bearing("6205", 25, 52, 15, 14000, 7800, _BALL),
    _bearing("6206", 30, 62, 16, 19500, 11400, _BALL),
    _bearing("6207", 35, 72, 17, 25500, 15300, _BALL),
    _bearing("6208", 40, 80, 18, 29600, 18600, _BALL),
    _bearing("6209", 45, 85, 19, 33200, 21600, _BALL),
    _bearing("6210", 50, 90, 20, 35100, 23200, _BALL),
    _bearing("6211", 55, 100, 21, 43600, 29600, _BALL),
    _bearing("6212", 60, 110, 22, 52700, 36500, _BALL),
    _bearing("6213", 65, 120, 23, 57200, 40500, _BALL),
    _bearing("6214", 70, 125, 24, 61800, 44000, _BALL),
    _bearing("6215", 75, 130, 25, 66300, 48000, _BALL),
    _bearing("6216", 80, 140, 26, 72800, 53000, _BALL),
    # 72 series, 25 deg contact angle
    _bearing("7201", 12, 32, 10, 7020, 3100, _ANGULAR),
    _bearing("7202", 15, 35, 11, 8060, 3900, _ANGULAR),
    _bearing("7203", 17, 40, 12, 10400, 5200, _ANGULAR),
    _bearing("7204", 20, 47, 14, 14300, 7350, _ANGULAR),
    _bearing("7205", 25, 52, 15, 15900, 8800, _ANGULAR),
    _bearing("7206", 30, 62, 16, 22900, 13000, _ANGULAR),
    _bearing("7207", 35, 72, 17, 30700, 18000, _ANGULAR),
    _bearing("7208", 40, 80, 18, 35800, 22400, _ANGULAR),
    _bearing("7209", 45, 85, 19, 39700, 25500, _ANGULAR),
    _bearing("7210", 50, 90, 20, 42300, 27500, _ANGULAR),
    _bearing("30202", 15, 35, 11.75, 12700, 10200, _TAPERED),
    _bearing("30203", 17, 40, 13.25, 15600, 13000, _TAPERED),
    _bearing("30204", 20, 47, 15.25, 20800, 18000, _TAPERED),
    _bearing("30205", 25, 52, 16.25, 24500, 22400, _TAPERED),
    _bearing("30206", 30, 62, 17.25, 32500, 31000, _TAPERED),
    _bearing("30207", 35, 72, 18.25, 44000, 43000, _TAPERED),
    _bearing("30208", 40, 80, 19.75, 50700, 51000, _TAPERED),
    _bearing("30209", 45, 85, 20.75, 55900, 58500, _TAPERED),
    _bearing("30210", 50, 90, 21.75, 61200, 66300, _TAPERED),
    _bearing("1200", 10, 30, 9, 3120, 1250, _SELF_ALIGNING),
    _bearing("1201", 12, 32, 10, 4160, 1730, _SELF_ALIGNING),
    _bearing("1202", 15, 35, 11, 4680, 2040, _SELF_ALIGNING),
    _bearing("1203", 17, 40, 12, 5720, 2600, _SELF_ALIGNING),
    _bearing("1204", 20, 47, 14, 7540, 3650, _SELF_ALIGNING),
    _bearing("1205", 25, 52, 15, 8190, 4250, _SELF_ALIGNING),
    _bearing("1206", 30, 62, 16, 11700, 6300, _SELF_ALIGNING),
    _bearing("1207", 35, 72, 17, 15100, 8500, _SELF_ALIGNING),
    _bearing("1208", 40, 80, 18, 17500, 10200, _SELF_ALIGNING),
    _bearing("1209", 45, 85, 19, 19600, 11800, _SELF_ALIGNING),
    _bearing("1210", 50, 90, 20, 20800, 12700, _SELF_ALIGNING),
    _bearing("NU 204", 20, 47, 14, 22400, 18000, _CYLINDRICAL),
    _bearing("NU 205", 25, 52, 15, 25500, 22400, _CYLINDRICAL),
    _bearing("NU 206", 30, 62, 16, 35100, 33000, _CYLINDRICAL),
    _bearing("NU 207", 35, 72, 17, 45500, 45000, _CYLINDRICAL),
    _bearing("NU 208", 40, 80, 18, 52000, 53000, _CYLINDRICAL),
    _bearing("NU 209", 45, 85, 19, 57200, 60000, _CYLINDRICAL),
    _bearing("NU 210", 50, 90, 20, 61800, 66300, _CYLINDRICAL),
)


def merge_bearing_rows(*sources) -> tuple[BearingCatalogEntry, ...]:
    """
    Merge bearing rows by designation, keeping the first occurrence.

    Sources are given in order of precedence.
    """
    merged: dict[str, BearingCatalogEntry] = {}
    for rows in sources:
        for row in rows:
            merged.setdefault(row.designation, row)
    return tuple(merged.values())


BEARING_CATALOG: tuple[BearingCatalogEntry, ...] = merge_bearing_rows(
    _SPEED_RATED_BEARINGS, _LOAD_RATED_BEARINGS
)


# =============================================================================
# Standard series
# =============================================================================

# DIN 780 normal modules (mm)
STANDARD_MODULES: tuple[float, ...] = (1, 1.25, 1.5, 2, 2.5, 3, 4, 5, 6, 8, 10, 12, 16, 20)

# Preferred shaft (bearing seat) diameters (mm)
STANDARD_SHAFT_DIAMETERS: tuple[float, ...] = (
    15, 17, 20, 25, 30, 35, 40, 45, 50, 55, 60, 65, 70, 75, 80, 85, 90, 95, 100, 110, 120
)


def _key(d_min, d_max, b, h, t1, t2) -> Keyway:
    return Keyway(
        d_min_mm=d_min,
        d_max_mm=d_max,
        width_mm=b,
        height_mm=h,
        shaft_depth_mm=t1,
        hub_depth_mm=t2,
    )


# DIN 6885 parallel keys
STANDARD_KEYWAYS: tuple[Keyway, ...] = (
    _key(12, 17, 5, 5, 3.0, 2.3),
    _key(17, 22, 6, 6, 3.5, 2.8),
    _key(22, 30, 8, 7, 4.0, 3.3),
    _key(30, 38, 10, 8, 5.0, 3.3),
    _key(38, 44, 12, 8, 5.0, 3.3),
    _key(44, 50, 14, 9, 5.5, 3.8),
    _key(50, 58, 16, 10, 6.0, 4.3),
    _key(58, 65, 18, 11, 7.0, 4.4),
    _key(65, 75, 20, 12, 7.5, 4.9),
    _key(75, 85, 22, 14, 9.0, 5.4),
    _key(85, 95, 25, 14, 9.0, 5.4),
    _key(95, 110, 28, 16, 10.0, 6.4),
    _key(110, 130, 32, 18, 11.0, 7.4),
)

# Cylindrical shaft ends: (largest seat diameter, extension diameter dc, extension length lc)
SHAFT_EXTENSIONS: tuple[tuple[float, float, float], ...] = (
    (12, 12, 30), (14, 14, 30), (16, 16, 40), (19, 19, 40), (20, 20, 50),
    (22, 22, 50), (24, 24, 60), (25, 25, 60), (28, 28, 60), (30, 30, 80),
    (32, 32, 80), (35, 35, 80), (38, 38, 80), (40, 40, 110), (42, 42, 110),
    (45, 45, 110), (48, 48, 110), (50, 50, 110), (55, 55, 110), (60, 60, 140),
    (65, 65, 140), (70, 70, 140), (75, 75, 140), (80, 80, 170), (85, 85, 170),
    (90, 90, 170), (95, 95, 170), (100, 100, 210), (110, 110, 210), (120, 120, 210),
    (140, 140, 250), (160, 160, 300), (180, 180, 300),
)
SHAFT_EXTENSION_FALLBACK_LENGTH_MM = 350.0


# =============================================================================
# Interpolation tables
# =============================================================================

# Tooth form factor Kf for zero-shifted teeth vs equivalent tooth count
FORM_FACTOR_TABLE: tuple[tuple[float, float], ...] = (
    (12, 3.70), (14, 3.33), (15, 3.23), (16, 3.15), (17, 3.08), (18, 3.00),
    (19, 2.98), (20, 2.95), (21, 2.90), (22, 2.86), (23, 2.82), (24, 2.78),
    (25, 2.73), (26, 2.70), (27, 2.67), (28, 2.64), (29, 2.62), (30, 2.60),
    (35, 2.51), (40, 2.45), (45, 2.41), (50, 2.37), (65, 2.29), (70, 2.28),
    (80, 2.25), (90, 2.23), (100, 2.21),
)
FORM_FACTOR_ASYMPTOTE = 2.20
FORM_FACTOR_ASYMPTOTE_TEETH = 100.0

# Helix angle factor Kb vs helix angle (deg)
HELIX_ANGLE_FACTOR_TABLE: tuple[tuple[float, float], ...] = (
    (0, 1.0), (10, 0.99), (12, 0.985), (14, 0.98), (16, 0.97), (18, 0.964),
    (20, 0.954), (22, 0.94), (24, 0.933), (26, 0.922), (30, 0.905), (32, 0.894),
    (35, 0.855),
)
HELIX_ANGLE_FACTOR_ASYMPTOTE = 0.855
HELIX_ANGLE_ASYMPTOTE_DEG = 35.0


# =============================================================================
# Lookups
# =============================================================================

def get_material(name: str, category: MaterialCategory = MaterialCategory.GEAR) -> Material:
    """
    Look up a material by name in one catalog.

    The same DIN designation can appear in both catalogs with different
    properties, so the category is part of the key.

    Raises:
        UnknownMaterialError: If the name is not listed in the category
    """
    try:
        return MATERIALS_BY_CATEGORY[MaterialCategory(category)][name]
    except KeyError:
        raise UnknownMaterialError(
            f"Unknown {MaterialCategory(category).value} material: {name!r}"
        ) from None


def material_names(category: MaterialCategory = MaterialCategory.GEAR) -> list[str]:
    """Names of all materials in a catalog, in catalog order."""
    return list(MATERIALS_BY_CATEGORY[MaterialCategory(category)])


def normalize_designation(designation: str) -> str:
    """Canonical form of a bearing designation ('nu205' -> 'NU205')."""
    return "".join(designation.split()).upper()


def find_bearing(
    designation: str,
    catalog: Optional[Sequence[BearingCatalogEntry]] = None,
) -> Optional[BearingCatalogEntry]:
    """
    Find a bearing by designation, ignoring whitespace and case.

    Args:
        designation: Catalog designation, e.g. '6205' or 'NU 205'
        catalog: Catalog to search (built-in catalog if None)

    Returns:
        The matching entry, or None if not listed
    """
    wanted = normalize_designation(designation)
    for entry in catalog if catalog is not None else BEARING_CATALOG:
        if normalize_designation(entry.designation) == wanted:
            return entry
    return None
