"""Fixed layout of the protection sim template.

Sheet names and column letters below describe one revision of the sim
workbook. A template change that moves a column requires updating this
module. Tables are ordered tuples: their order decides clause order in the
generated sentences.
"""

# Sheets
OVERVIEW = "Overview"
POPULATION = "Population"
PRODUCTION = "Production"
CONSTRUCTION = "Construction"
EXPLORE = "Explore"
REZONE = "Rezone"
MILITARY = "Military"
MAGIC = "Magic"
TECHS = "Techs"
IMPS = "Imps"

SHEETS = (
    OVERVIEW,
    POPULATION,
    PRODUCTION,
    CONSTRUCTION,
    EXPLORE,
    REZONE,
    MILITARY,
    MAGIC,
    TECHS,
    IMPS,
)

# Row in Military holding unit names above the per-hour columns
UNIT_NAME_ROW = 2

# Header text occupying the previous-rate column above hour 1
DRAFT_RATE_SENTINEL = "Draftrate"

# Fixed (not hour-indexed) cells
SIM_START_DATE_CELL = ("B", 15)  # Overview
HOME_LAND_TYPE_CELL = ("B", 70)  # Overview

# Tick
LOCAL_TIME_COLUMN = "BY"  # Imps
DOM_TIME_COLUMN = "BZ"  # Imps

# Draft rate
DRAFT_RATE_COLUMN = "Y"  # Military, rate chosen this hour
PREVIOUS_DRAFT_RATE_COLUMN = "Z"  # Military, rate in effect after the hour

# Release
RELEASE_FIRST_UNIT_COLUMN = "AY"  # Military, followed by 7 more unit columns
RELEASE_UNIT_COUNT = 8

# Magic
MANA_COST_COLUMN = "Y"

GAIAS_WATCH = "Gaia's Watch"
MINING_STRENGTH = "Mining Strength"
ARES_CALL = "Ares' Call"
MIDAS_TOUCH = "Midas Touch"
HARMONY = "Harmony"
RACIAL_SPELL = "Racial Spell"

SPELLS: tuple[tuple[str, str], ...] = (
    (GAIAS_WATCH, "G"),
    (MINING_STRENGTH, "H"),
    (ARES_CALL, "I"),
    (MIDAS_TOUCH, "J"),
    (HARMONY, "K"),
    (RACIAL_SPELL, "L"),
    (RACIAL_SPELL, "M"),
    (RACIAL_SPELL, "N"),
    (RACIAL_SPELL, "O"),
    (RACIAL_SPELL, "P"),
    (RACIAL_SPELL, "Q"),
    (RACIAL_SPELL, "R"),
    (RACIAL_SPELL, "S"),
    (RACIAL_SPELL, "T"),
    (RACIAL_SPELL, "U"),
)

# Techs
TECH_UNLOCKED_COLUMN = "K"
TECH_NAME_COLUMN = "CA"

# Daily bonuses
DAILY_PLATINUM_COLUMN = "C"  # Production
PEASANTS_COLUMN = "C"  # Population
DAILY_LAND_COLUMN = "S"  # Explore

# Bank exchange, Production sheet
TRADE_RESOURCES: tuple[tuple[str, str], ...] = (
    ("platinum", "BC"),
    ("lumber", "BD"),
    ("ore", "BE"),
    ("gems", "BF"),
)

# Land types, Explore sheet
EXPLORE_LANDS: tuple[tuple[str, str], ...] = (
    ("Plains", "T"),
    ("Forest", "U"),
    ("Mountains", "V"),
    ("Hills", "W"),
    ("Swamps", "X"),
    ("Caverns", "Y"),
    ("Water", "Z"),
)
EXPLORE_PLATINUM_COST_COLUMN = "AH"
EXPLORE_DRAFTEE_COST_COLUMN = "AI"

# Land types, Rezone sheet
REZONE_LANDS: tuple[tuple[str, str], ...] = (
    ("Plains", "L"),
    ("Forest", "M"),
    ("Mountains", "N"),
    ("Hills", "O"),
    ("Swamps", "P"),
    ("Caverns", "Q"),
    ("Water", "R"),
)
REZONE_PLATINUM_COST_COLUMN = "Y"

# Buildings, Construction sheet
BUILDING_NAMES = (
    "Homes",
    "Alchemies",
    "Farms",
    "Smithies",
    "Masonries",
    "Lumber Yards",
    "Ore Mines",
    "Gryphon Nests",
    "Factories",
    "Guard Towers",
    "Barracks",
    "Shrines",
    "Towers",
    "Temples",
    "Wizard Guilds",
    "Diamond Mines",
    "Schools",
    "Docks",
)

DESTROY_BUILDING_COLUMNS = (
    "BW", "BX", "BY", "BZ", "CA", "CB", "CD", "CE", "CF",
    "CG", "CH", "CI", "CJ", "CK", "CL", "CM", "CN", "CO",
)  # fmt: skip

CONSTRUCT_BUILDING_COLUMNS = (
    "O", "P", "Q", "R", "S", "T", "V", "W", "X",
    "Y", "Z", "AA", "AB", "AC", "AD", "AE", "AF", "AG",
)  # fmt: skip

DESTROY_BUILDINGS: tuple[tuple[str, str], ...] = tuple(
    zip(BUILDING_NAMES, DESTROY_BUILDING_COLUMNS, strict=True)
)
CONSTRUCT_BUILDINGS: tuple[tuple[str, str], ...] = tuple(
    zip(BUILDING_NAMES, CONSTRUCT_BUILDING_COLUMNS, strict=True)
)
CONSTRUCTION_PLATINUM_COST_COLUMN = "AQ"
CONSTRUCTION_LUMBER_COST_COLUMN = "AR"

# Training, Military sheet
TRAIN_UNIT_COLUMNS = ("AG", "AH", "AI", "AJ", "AK", "AL", "AM", "AN")
TRAIN_SPIES_POSITION = 5
TRAIN_WIZARDS_POSITION = 7
TRAIN_PLATINUM_COST_COLUMN = "AR"
TRAIN_ORE_COST_COLUMN = "AS"

# Castle improvements, Imps sheet: (amount, resource, improvement)
IMPROVEMENTS: tuple[tuple[str, str, str], ...] = (
    ("P", "O", "Q"),
    ("S", "R", "T"),
    ("V", "U", "W"),
)
