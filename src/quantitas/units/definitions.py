"""
quantitas.units.definitions
===========================

Static unit tables used to bootstrap the default registry.

Each prefix is ``(token, aliases, factor)``. Units are grouped by category;
every category names the base-unit composition (numerator and denominator
tokens) that one unit of scalar 1 reduces to, and lists its units as
``(token, aliases, scalar)``. The first alias of a token is its output
spelling.

Scalars are written as strings so that they are read into ``Decimal``
exactly; the few irrational or fractional factors are computed once here.
"""

from __future__ import annotations

from decimal import Decimal
from typing import NamedTuple, Tuple, Union

ScalarLike = Union[str, Decimal]

_PI = Decimal("3.141592653589793238462643383279502884")
_FIVE_NINTHS = Decimal(5) / Decimal(9)
_TWO = Decimal(2)


class Category(NamedTuple):
    name: str
    numerator: Tuple[str, ...]
    denominator: Tuple[str, ...]
    units: Tuple[Tuple[str, Tuple[str, ...], ScalarLike], ...]


UNITY = "<1>"

# Tokens a fully reduced quantity may contain.
BASE_UNITS = frozenset({
    "<meter>", "<kilogram>", "<second>", "<mole>", "<farad>", "<ampere>",
    "<radian>", "<kelvin>", "<temp-K>", "<byte>", "<dollar>", "<candela>",
    "<each>", "<steradian>", "<bel>",
})

# Order fixes the signature weights (20 ** index); do not reorder.
DIMENSION_FAMILIES = (
    "length", "time", "temperature", "mass", "current", "substance",
    "luminosity", "currency", "data", "angle", "capacitance",
)

# ---------------------------------------------------------------------------
# Prefixes
# ---------------------------------------------------------------------------
PREFIXES: Tuple[Tuple[str, Tuple[str, ...], ScalarLike], ...] = (
    ("<googol>", ("googol",), "1e100"),
    ("<kibi>",   ("Ki", "Kibi", "kibi"), _TWO ** 10),
    ("<mebi>",   ("Mi", "Mebi", "mebi"), _TWO ** 20),
    ("<gibi>",   ("Gi", "Gibi", "gibi"), _TWO ** 30),
    ("<tebi>",   ("Ti", "Tebi", "tebi"), _TWO ** 40),
    ("<pebi>",   ("Pi", "Pebi", "pebi"), _TWO ** 50),
    ("<exi>",    ("Ei", "Exi", "exi"), _TWO ** 60),
    ("<zebi>",   ("Zi", "Zebi", "zebi"), _TWO ** 70),
    ("<yebi>",   ("Yi", "Yebi", "yebi"), _TWO ** 80),
    ("<yotta>",  ("Y", "Yotta", "yotta"), "1e24"),
    ("<zetta>",  ("Z", "Zetta", "zetta"), "1e21"),
    ("<exa>",    ("E", "Exa", "exa"), "1e18"),
    ("<peta>",   ("P", "Peta", "peta"), "1e15"),
    ("<tera>",   ("T", "Tera", "tera"), "1e12"),
    ("<giga>",   ("G", "Giga", "giga"), "1e9"),
    ("<mega>",   ("M", "Mega", "mega"), "1e6"),
    ("<kilo>",   ("k", "kilo"), "1e3"),
    ("<hecto>",  ("h", "Hecto", "hecto"), "1e2"),
    ("<deca>",   ("da", "Deca", "deca", "deka"), "1e1"),
    ("<deci>",   ("d", "Deci", "deci"), "1e-1"),
    ("<centi>",  ("c", "Centi", "centi"), "1e-2"),
    ("<milli>",  ("m", "Milli", "milli"), "1e-3"),
    ("<micro>",  ("u", "\u03bc", "\u00b5", "Micro", "mc", "micro"), "1e-6"),
    ("<nano>",   ("n", "Nano", "nano"), "1e-9"),
    ("<pico>",   ("p", "Pico", "pico"), "1e-12"),
    ("<femto>",  ("f", "Femto", "femto"), "1e-15"),
    ("<atto>",   ("a", "Atto", "atto"), "1e-18"),
    ("<zepto>",  ("z", "Zepto", "zepto"), "1e-21"),
    ("<yocto>",  ("y", "Yocto", "yocto"), "1e-24"),
)

# ---------------------------------------------------------------------------
# Units, by category
# ---------------------------------------------------------------------------
_M = "<meter>"
_KG = "<kilogram>"
_S = "<second>"
_A = "<ampere>"

UNIT_CATEGORIES: Tuple[Category, ...] = (
    Category("unitless", (), (), (
        (UNITY, ("1", UNITY), "1"),
    )),
    Category("acceleration", (_M,), (_S, _S), (
        ("<gee>", ("gee", "gforce", "gn"), "9.80665"),
    )),
    Category("angle", ("<radian>",), (), (
        ("<radian>",     ("rad", "radian", "radians"), "1"),
        ("<degree>",     ("deg", "degree", "degrees"), _PI / 180),
        ("<gradian>",    ("gon", "grad", "gradian", "grads"), _PI / 200),
        ("<aminutes>",   ("amin", "amins", "arcmin", "arcmins"), "0.0002908882"),
        ("<aseconds>",   ("asec", "asecs", "arcsec", "arcsecs"), "4.8481366667e-6"),
        ("<amils>",      ("amil", "amils"), "9.817477e-4"),
        ("<octant>",     ("octant",), "0.785398163"),
        ("<quadrant>",   ("quadrant", "quadrants"), "1.570796327"),
        ("<sextant>",    ("sextant",), "1.047197551"),
        ("<rev>",        ("rev",), "6.283185307"),
        ("<compass-pt>", ("cpoint",), "0.196349540849362"),
    )),
    Category("area", (_M, _M), (), (
        ("<acre>",    ("acre", "acres"), "4046.856422"),
        ("<acre-us>", ("acre(us)", "acres(us)"), "4046.873"),
        ("<ares>",    ("are", "ares"), "100"),
        ("<barn>",    ("barn", "barns"), "1e-28"),
        ("<dunam>",   ("dunam",), "1000"),
        ("<hectare>", ("ha", "hectare"), "10000"),
        ("<rood>",    ("rood", "roods"), "1011.714106"),
    )),
    # Farad is itself a base token, so prefixed farads reduce to it.
    Category("capacitance", ("<farad>",), (), (
        ("<farad>", ("farad", "Farad"), "1"),
    )),
    Category("charge", (_A, _S), (), (
        ("<coulomb>", ("coulomb", "Coulomb"), "1"),
        ("<esu>",     ("ESU", "esu", "Fr", "statC", "StatC"), "3.335640952e-10"),
    )),
    Category("currency", ("<dollar>",), (), (
        ("<dollar>", ("dollar", "dollars"), "1"),
        ("<cents>",  ("cents",), "0.01"),
    )),
    Category("current", (_A,), (), (
        ("<ampere>",      ("A", "Ampere", "ampere", "amp", "amps"), "1"),
        ("<biot>",        ("Biot",), "10"),
        ("<statampere>",  ("StatAmpere", "statA", "StatA"), "3.335641e-10"),
    )),
    Category("data", ("<byte>",), (), (
        ("<byte>",   ("B", "byte"), "1"),
        ("<bit>",    ("b", "bit"), "0.125"),
        ("<nibble>", ("nibble",), "0.5"),
    )),
    Category("electricalConductance", (_S, _S, _S, _A, _A), (_KG, _M, _M), (
        ("<siemens>", ("S", "Siemen", "Siemens", "siemens", "mho", "mhos"), "1"),
        ("<statmho>", ("statmho",), "1.112347052e-12"),
    )),
    Category("electricalInductance", (_M, _M, _KG), (_S, _S, _A, _A), (
        ("<henry>",   ("H", "Henry", "henry"), "1"),
        ("<abhenry>", ("abH",), "1e-9"),
        ("<statH>",   ("statH", "StatH"), "8.987552e11"),
    )),
    Category("electricalPotential", (_M, _M, _KG), (_S, _S, _S, _A), (
        ("<volt>",      ("V", "Volt", "volt", "volts"), "1"),
        ("<abvolt>",    ("abV", "abVolt"), "1e-8"),
        ("<statvolts>", ("statV",), "299.7925"),
    )),
    Category("electricalResistance", (_M, _M, _KG), (_S, _S, _S, _A, _A), (
        ("<ohm>",   ("Ohm", "ohm", "\u03a9", "\u2126"), "1"),
        ("<abohm>", ("abOhm",), "1e-9"),
    )),
    Category("energy", (_M, _M, _KG), (_S, _S), (
        ("<btu>",             ("BTU", "btu", "BTUs", "Btu"), "1055.055853"),
        ("<btu-thermo>",      ("BTU(th)", "btu(th)", "btus(th)", "Btu(th)"), "1054.35026444"),
        ("<calorie>",         ("cal", "calorie", "calories"), "4.1868"),
        ("<calorie-IUNS>",    ("cal(N)",), "4.182"),
        ("<calorie-thermo>",  ("cal(th)",), "4.184"),
        ("<erg>",             ("erg", "ergs"), "1e-7"),
        ("<electron-volts>",  ("eV",), "1.60217653e-19"),
        ("<joule>",           ("J", "joule", "Joule", "joules"), "1"),
        ("<therm-euro>",      ("thm", "therm", "therms", "Therm"), "105505590"),
        ("<therm-US>",        ("thm(us)", "therm(us)", "therms(us)", "Therm(us)"), "105480400"),
        ("<TNT>",             ("tTNT",), "4184000000"),
    )),
    Category("force", (_KG, _M), (_S, _S), (
        ("<newton>",          ("N", "Newton", "newton"), "1"),
        ("<dyne>",            ("dyn", "dyne"), "1e-5"),
        ("<gram-force>",      ("gf", "gram-force", "pond"), "0.00980665"),
        ("<kg-force>",        ("kgf", "kg-force", "kpond"), "9.80665"),
        ("<pound-force>",     ("lbf", "pound-force"), "4.448221615"),
        ("<ounce-force>",     ("ozf", "ounce-force"), "0.278013851"),
        ("<poundal>",         ("pdl", "poundal"), "0.138254954"),
        ("<tonne-force>",     ("tf", "tonnef"), "9806.65"),
        ("<ton-force-long>",  ("tonlf",), "9964.016418"),
        ("<ton-force-short>", ("tonsf",), "8896.4432"),
    )),
    Category("frequency", ("<radian>",), (_S,), (
        ("<hertz>", ("Hz", "hertz", "Hertz", "pers"), 2 * _PI),
        ("<rpm>",   ("rpm", "RPM"), 2 * _PI / 60),
    )),
    Category("length", (_M,), (), (
        ("<meter>",           ("m", "meter", "meters", "metre", "metres"), "1"),
        ("<angstrom>",        ("Å", "ang", "angstrom", "angstroms"), "1e-10"),
        ("<AU>",              ("AU", "au", "astronomical-unit"), "149597870700"),
        ("<caliber>",         ("caliber",), "0.0254"),
        ("<chain>",           ("chain", "chains"), "20.1168"),
        ("<chain-us>",        ("chain(us)",), "20.116840234"),
        ("<cubit>",           ("cubit",), "0.4572"),
        ("<cubit-long>",      ("cubit(l)",), "0.5334"),
        ("<fathom>",          ("fathom", "fathoms"), "1.8288"),
        ("<fermi>",           ("Fermi",), "1e-15"),
        ("<finger>",          ("finger", "fingers"), "0.1143"),
        ("<foot>",            ("ft", "foot", "feet", "'"), "0.3048"),
        ("<furlong>",         ("furlong", "furlongs"), "201.168"),
        ("<furlong-us>",      ("furlong(us)", "furlong(uss)"), "201.16840234"),
        ("<gmile>",           ("gmile",), "1855.3257"),
        ("<hand>",            ("hand", "hands"), "0.1016"),
        ("<league>",          ("league", "league(us)"), "4828.0417"),
        ("<inch>",            ("in", "inch", "inches", '"'), "0.0254"),
        ("<link>",            ("link", "links"), "0.201168"),
        ("<link-us>",         ("link(us)",), "0.20116840234"),
        ("<light-minute>",    ("lmin", "light-minute"), "17987547480"),
        ("<light-second>",    ("ls", "light-second"), "299792458"),
        ("<light-year>",      ("ly", "light-year"), "9460730472580800"),
        ("<micron>",          ("micron",), "1e-6"),
        ("<mil>",             ("mil", "mils"), "0.0000254"),
        ("<mile>",            ("mi", "mile", "miles"), "1609.344"),
        ("<nail>",            ("nail", "nails"), "0.05715"),
        ("<naut-league>",     ("nleague",), "5556"),
        ("<naut-league-uk>",  ("nleague(uk)",), "5559.552"),
        ("<naut-mile>",       ("nmi",), "1852"),
        ("<parsec>",          ("pc", "parsec", "parsecs"), "30856780000000000"),
        ("<pica>",            ("pica", "picas"), "0.00423333333"),
        ("<planck-length>",   ("Planck",), "1.616252e-35"),
        ("<point>",           ("point", "points"), "0.000352777777777778"),
        ("<rod>",             ("rd", "rod", "rods"), "5.0292"),
        ("<rod-us>",          ("rod(us)",), "5.029210058"),
        ("<rope>",            ("rope", "ropes"), "6.096"),
        ("<thou>",            ("th",), "0.0000254"),
        ("<span>",            ("span",), "0.2286"),
        ("<yard>",            ("yd", "yard", "yards"), "0.9144"),
    )),
    Category("magneticFlux", (_M, _M, _KG), (_S, _S, _A), (
        ("<weber>",   ("Wb", "weber", "webers"), "1"),
        ("<maxwell>", ("Mx", "maxwell", "maxwells"), "1e-8"),
        ("<line>",    ("line",), "1e-8"),
    )),
    Category("magneticFluxDensity", (_KG,), (_S, _S, _A), (
        ("<tesla>", ("T", "tesla", "teslas"), "1"),
        ("<gauss>", ("G", "gauss"), "1e-4"),
    )),
    Category("mass", (_KG,), (), (
        ("<kilogram>",            ("kg", "kilogram", "kilograms"), "1"),
        ("<AMU>",                 ("u", "AMU", "amu"), "1.660538921e-27"),
        ("<carat>",               ("ct", "carat", "carats"), "0.0002"),
        ("<dalton>",              ("Da", "Dalton", "Daltons", "dalton", "daltons"), "1.660538921e-27"),
        ("<dram>",                ("dram", "drams", "dr"), "0.0017718452"),
        ("<gram>",                ("g", "gram", "grams", "gramme", "grammes"), "1e-3"),
        ("<grain>",               ("grain", "grains", "gr"), "6.479891e-5"),
        ("<hundredweight-short>", ("cwt(s)",), "45.359237"),
        ("<hundredweight-long>",  ("cwt(l)",), "50.80234544"),
        ("<ounce>",               ("oz", "ounce", "ounces"), "0.0283495231"),
        ("<ounce-troy>",          ("ozt",), "0.031103477"),
        ("<pennyweight>",         ("dwt",), "0.00155517384"),
        ("<pound>",               ("lbs", "lb", "pound", "pounds", "#"), "0.45359237"),
        ("<pound-troy>",          ("lbt",), "0.3732417"),
        ("<quarter-short>",       ("qr(s)",), "11.33980925"),
        ("<quarter-long>",        ("qr(l)",), "12.70058636"),
        ("<slug>",                ("slug", "slugs"), "14.5939029"),
        ("<stone>",               ("stone", "stones", "st"), "6.35029318"),
        ("<ton-metric>",          ("t", "tonne"), "1000"),
        ("<ton-long>",            ("tnl", "ton(l)", "tonl"), "1016.0469088"),
        ("<ton-short>",           ("tn", "ton", "ton(s)", "tons"), "907.18474"),
    )),
    Category("power", (_KG, _M, _M), (_S, _S, _S), (
        ("<watt>",                ("W", "watt", "watts"), "1"),
        ("<horsepower>",          ("Hp", "hp", "horsepower"), "745.699872"),
        ("<horsepower-electric>", ("Hp(e)", "hp(e)", "hp(electric)"), "746"),
        ("<horsepower-metric>",   ("Hp(m)", "hp(m)"), "735.49875"),
    )),
    Category("pressure", (_KG,), (_M, _S, _S), (
        ("<pascal>", ("Pa", "pascal", "Pascal"), "1"),
        ("<at>",     ("at",), "98066.5"),
        ("<atm>",    ("atm", "atmosphere", "atmospheres"), "101325"),
        ("<bar>",    ("bar", "bars"), "100000"),
        ("<barye>",  ("barye",), "0.1"),
        ("<cmh2o>",  ("cmH2O",), "98.0638"),
        ("<cmHg>",   ("cmHg",), "1333.223874"),
        ("<inh2o>",  ("inH2O",), "249.082052"),
        ("<inHg>",   ("inHg",), "3386.3881472"),
        ("<mmh2o>",  ("mmH2O",), "9.80665"),
        ("<mmHg>",   ("mmHg",), "133.322387415"),
        ("<pieze>",  ("pieze",), "1000"),
        ("<psf>",    ("psf",), "47.880259"),
        ("<psi>",    ("psi",), "6894.757293"),
        ("<torr>",   ("torr",), "133.322368"),
    )),
    Category("radiation", (_M, _M), (_S, _S), (
        ("<gray>",      ("Gy", "gray", "grays"), "1"),
        ("<roentgen>",  ("roentgen",), "0.009330"),
        ("<sievert>",   ("Sv", "sievert", "sieverts"), "1"),
    )),
    Category("radioactivity", (UNITY,), (_S,), (
        ("<becquerel>", ("Bq", "bequerel", "bequerels"), "1"),
        ("<curie>",     ("Ci", "curie", "curies"), "3.7e10"),
    )),
    Category("sound", ("<bel>",), (), (
        ("<bel>",   ("Bels", "Bel"), "1"),
        ("<neper>", ("Neper",), "0.8686"),
    )),
    Category("substance", ("<mole>",), (), (
        ("<mole>", ("mol", "mole"), "1"),
    )),
    # The bare letters C, F and R name the degree scales.
    Category("temperature", ("<kelvin>",), (), (
        ("<kelvin>",     ("degK", "kelvin", "K"), "1"),
        ("<celsius>",    ("degC", "celsius", "centigrade", "C"), "1"),
        ("<fahrenheit>", ("degF", "fahrenheit", "F"), _FIVE_NINTHS),
        ("<rankine>",    ("degR", "rankine", "R"), _FIVE_NINTHS),
        ("<temp-K>",     ("tempK",), "1"),
        ("<temp-C>",     ("tempC",), "1"),
        ("<temp-F>",     ("tempF",), _FIVE_NINTHS),
        ("<temp-R>",     ("tempR",), _FIVE_NINTHS),
    )),
    Category("time", (_S,), (), (
        ("<second>",        ("s", "sec", "secs", "second", "seconds"), "1"),
        ("<minute>",        ("min", "mins", "minute", "minutes"), "60"),
        ("<hour>",          ("h", "hr", "hrs", "hour", "hours"), "3600"),
        ("<day>",           ("d", "day", "days"), "86400"),
        ("<week>",          ("wk", "week", "weeks"), "604800"),
        ("<fortnight>",     ("fortnight", "fortnights"), "1209600"),
        ("<month>",         ("month", "months"), "2629740"),
        ("<year>",          ("y", "yr", "year", "years", "annum"), "31536000"),
        ("<year-julian>",   ("y(j)", "yr(j)", "year(j)", "years(j)"), "31557600"),
        ("<year-leap>",     ("y(l)", "yr(l)", "year(l)", "years(l)"), "31622400"),
        ("<year-tropical>", ("tyr", "tyrs"), "31556925.19"),
        ("<decade>",        ("decade", "decades"), "315360000"),
        ("<century>",       ("century", "centuries"), "3153600000"),
        ("<millienia>",     ("millienia", "millenium"), "31536000000"),
        ("<shake>",         ("shake",), "1e-8"),
    )),
    Category("velocity", (_M,), (_S,), (
        ("<kph>",         ("kph",), "0.277777778"),
        ("<mph>",         ("mph",), "0.44704"),
        ("<knot>",        ("kn", "knot", "knots"), "0.514444444"),
        ("<mach>",        ("mach",), "295.0464"),
        ("<light-speed>", ("lspeed", "light"), "299792458"),
    )),
    Category("viscosity", (_KG,), (_M, _S), (
        ("<poise>", ("P", "poise"), "0.1"),
        ("<reyn>",  ("reyn",), "6894.75729"),
    )),
    Category("viscosityKinematic", (_M, _M), (_S,), (
        ("<stoke>", ("St", "Stokes"), "1e-4"),
    )),
    Category("volume", (_M, _M, _M), (), (
        ("<barrels-us-petroleum>",  ("bbl(us)", "bbl"), "0.158987295"),
        ("<barrels-uk>",            ("bl(uk)", "bl(imp)"), "0.16365924"),
        ("<barrels-us-dry>",        ("bl(usd)",), "0.115627124"),
        ("<barrels-us-liquid>",     ("bl(usl)",), "0.119240471"),
        ("<bushels-us>",            ("bu", "bsh", "bushel", "bushel(us)"), "0.035239072"),
        ("<bushels-uk>",            ("bu(uk)", "bushel(uk)", "bushel(imp)"), "0.03636872"),
        ("<cup-metric>",            ("cup", "cup(metric)"), "0.00025"),
        ("<cup-imperial>",          ("cup(imp)",), "2.84130625e-4"),
        ("<cup-us-customary>",      ("cup(usc)",), "2.365882365e-4"),
        ("<cup-us-legal>",          ("cup(usl)",), "0.00024"),
        ("<dram-fluid>",            ("dr(f)", "dram(f)"), "3.6966911953e-06"),
        ("<drum-metric-petroleum>", ("drum(mp)",), "0.2"),
        ("<drum-us-petroleum>",     ("drum(usp)",), "0.208197648"),
        ("<fluid-ounce>",           ("floz", "fluid-ounce", "fluid-ounces"), "2.84130625e-5"),
        ("<fluid-ounce-us>",        ("oz(usl)", "oz(usf)", "floz(us)"), "2.95735296e-5"),
        ("<gallon-uk>",             ("gal", "gal(imp)", "gal(uk)"), "0.00454609"),
        ("<gallon-us-dry>",         ("gal(usd)", "gal(us dry)"), "0.004404884"),
        ("<gallon-us-liquid>",      ("gal(us)", "gal(usl)", "gal(us fl)"), "0.003785412"),
        ("<liter>",                 ("l", "L", "liter", "liters", "litre", "litres"), "0.001"),
        ("<pecks-uk>",              ("peck(uk)", "pecks(uk)"), "0.00909218"),
        ("<pecks-us>",              ("peck(us)", "pecks(us)"), "0.008809768"),
        ("<pint>",                  ("pt", "pint", "pints", "pint(us fl)"), "0.000473176475"),
        ("<pint-uk>",               ("pt(uk)", "pint(uk)", "pints(uk)"), "0.00056826125"),
        ("<pint-us-dry>",           ("pt(usd)", "pint(usd)", "pints(usd)"), "0.000550610475"),
        ("<pint-us-liquid>",        ("pt(usl)", "pint(usl)", "pints(usl)"), "0.000473176473"),
        ("<quart>",                 ("qt", "quart", "quarts"), "0.00094635295"),
        ("<quart-uk>",              ("qt(uk)", "quart(uk)", "quarts(uk)"), "0.0011365225"),
        ("<quart-us-dry>",          ("qt(usd)", "quart(usd)", "quarts(usd)"), "1.10122095e-3"),
        ("<quart-us-liquid>",       ("qt(usl)", "quart(usl)", "quarts(usl)"), "9.46352946e-4"),
        ("<tablespoon-metric>",     ("tb", "tbs", "tablespoon", "tablespoons"), "0.000015"),
        ("<tablespoon-uk>",         ("tb(uk)", "tbs(uk)", "tablespoon(uk)", "tablespoons(uk)"), "1.420653125e-5"),
        ("<tablespoon-us>",         ("tb(us)", "tbs(us)", "tablespoon(us)", "tablespoons(us)"), "1.478676478125e-5"),
        ("<teaspoon-metric>",       ("tsp", "teaspoon", "teaspoons"), "0.000005"),
        ("<teaspoon-us>",           ("tsp(us)", "teaspoon(us)", "teaspoons(us)"), "4.92892161e-6"),
    )),
)

# Absolute (affine) and relative (delta) temperature scales, keyed by token.
TEMPERATURE_SCALES = {
    "<temp-K>": "K", "<temp-C>": "C", "<temp-F>": "F", "<temp-R>": "R",
}
DEGREE_SCALES = {
    "<kelvin>": "K", "<celsius>": "C", "<fahrenheit>": "F", "<rankine>": "R",
}

__all__ = [
    "BASE_UNITS",
    "Category",
    "DEGREE_SCALES",
    "DIMENSION_FAMILIES",
    "PREFIXES",
    "TEMPERATURE_SCALES",
    "UNITY",
    "UNIT_CATEGORIES",
]
