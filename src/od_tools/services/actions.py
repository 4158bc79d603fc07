"""Per-category extractors turning one hour of sim cells into log lines.

Every action takes an :class:`ActionContext` and returns a narrative line,
or an empty string when nothing of its kind happened that hour. Empty cells
and numeric zeros mean "nothing happened"; text where a number is expected
raises :class:`~od_tools.utils.exceptions.CellValueError`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, time

from openpyxl.utils import get_column_letter

from od_tools import layout
from od_tools.cells import CellKind, CellValue, column_index, format_number
from od_tools.config import Settings
from od_tools.services.hour_stepper import HourContext
from od_tools.services.sim_workbook import SimWorkbook
from od_tools.utils.exceptions import CellValueError


@dataclass(frozen=True)
class ActionContext:
    """Everything an action needs to read one hour of the sim."""

    sim: SimWorkbook
    hour: HourContext
    settings: Settings

    def cell(self, sheet: str, letters: str) -> CellValue:
        return self.sim.read_by_hour(sheet, letters, self.hour)

    def number(self, sheet: str, letters: str) -> int | float | None:
        return self.sim.number(sheet, letters, self.hour.data_row)

    def count(self, sheet: str, letters: str) -> int | float:
        return self.sim.count(sheet, letters, self.hour.data_row)


ActionFunc = Callable[[ActionContext], str]


@dataclass(frozen=True)
class Action:
    """A named extractor.

    Disabled actions still run so their reads stay exercised, but their
    output never reaches the log.
    """

    name: str
    extract: ActionFunc
    enabled: bool = True


def _nonzero_items(
    ctx: ActionContext, sheet: str, table: tuple[tuple[str, str], ...]
) -> list[str]:
    """Format ``"{amount} {label}"`` for each non-zero column of ``table``."""
    items = []
    for label, letters in table:
        amount = ctx.count(sheet, letters)
        if amount == 0:
            continue
        items.append(f"{format_number(amount)} {label}")
    return items


def _unit_name(ctx: ActionContext, letters: str) -> str:
    name = ctx.sim.cell(layout.MILITARY, letters, layout.UNIT_NAME_ROW)
    if name.is_empty:
        raise CellValueError(
            layout.MILITARY, f"{letters}{layout.UNIT_NAME_ROW}", "a unit name", None
        )
    return str(name)


def _flag_set(ctx: ActionContext, sheet: str, letters: str) -> bool:
    """Gate cells count as set unless blank or zero; text such as 'x' is set."""
    return not ctx.cell(sheet, letters).is_blank_or_zero


def _timestamp(ctx: ActionContext, letters: str) -> str:
    value = ctx.cell(layout.IMPS, letters)
    if value.kind is not CellKind.DATETIME:
        raise CellValueError(
            layout.IMPS, f"{letters}{ctx.hour.data_row}", "a date or time", value.value
        )
    if isinstance(value.value, time):
        # Time-only cells take their date from the sim start date
        column, row = layout.SIM_START_DATE_CELL
        start = ctx.sim.cell(layout.OVERVIEW, column, row)
        if start.kind is CellKind.DATETIME and isinstance(start.value, datetime):
            combined = datetime.combine(start.value.date(), value.value)
            return str(CellValue(CellKind.DATETIME, combined))
    return str(value)


def tick_action(ctx: ActionContext) -> str:
    local_time = _timestamp(ctx, layout.LOCAL_TIME_COLUMN)
    dom_time = _timestamp(ctx, layout.DOM_TIME_COLUMN)
    return (
        f"====== Protection Hour: {ctx.hour.display_hour} "
        f"( Local Time: {local_time} ) ( Domtime: {dom_time} ) ======\n"
    )


def draft_rate_action(ctx: ActionContext) -> str:
    """Report a draft rate change against the rate in effect last hour.

    Above hour 1 the previous-rate column holds its header text; an empty
    current cell there means the sim starts on the default rate.
    """
    current = ctx.cell(layout.MILITARY, layout.DRAFT_RATE_COLUMN)
    previous = ctx.sim.cell(
        layout.MILITARY, layout.PREVIOUS_DRAFT_RATE_COLUMN, ctx.hour.previous_row
    )

    at_header = (
        previous.kind is CellKind.TEXT and previous.value == layout.DRAFT_RATE_SENTINEL
    )

    if current.is_empty:
        if at_header:
            rate: float = ctx.settings.default_draft_rate
        else:
            return ""
    elif current.is_numeric:
        rate = current.value
    else:
        raise CellValueError(
            layout.MILITARY,
            f"{layout.DRAFT_RATE_COLUMN}{ctx.hour.data_row}",
            "a draft rate",
            current.value,
        )

    if previous.is_numeric and previous.value == rate:
        return ""

    return f"Draftrate changed to {round(rate * 100)}%\n"


def release_units_action(ctx: ActionContext) -> str:
    first = column_index(layout.RELEASE_FIRST_UNIT_COLUMN)
    released = []
    for column in range(first, first + layout.RELEASE_UNIT_COUNT):
        letters = get_column_letter(column)
        amount = ctx.count(layout.MILITARY, letters)
        if amount == 0:
            continue
        released.append(f"{format_number(amount)} {_unit_name(ctx, letters)}")

    lines = []
    if released:
        lines.append(f"You successfully released {', '.join(released)}.\n")

    # Draftees sit one column left of the first unit
    draftees = ctx.count(layout.MILITARY, get_column_letter(first - 1))
    if draftees != 0:
        lines.append(
            f"You successfully released {format_number(draftees)} draftees "
            "into the peasantry.\n"
        )

    return "".join(lines)


def cast_spells_action(ctx: ActionContext) -> str:
    cast = [
        spell
        for spell, letters in layout.SPELLS
        if not ctx.cell(layout.MAGIC, letters).is_blank_or_zero
    ]
    if not cast:
        return ""

    mana = format_number(ctx.count(layout.MAGIC, layout.MANA_COST_COLUMN))
    return "".join(
        f"Your wizards successfully cast {spell} at a cost of {mana} mana.\n"
        for spell in cast
    )


def unlock_tech_action(ctx: ActionContext) -> str:
    if not _flag_set(ctx, layout.TECHS, layout.TECH_UNLOCKED_COLUMN):
        return ""

    tech = ctx.cell(layout.TECHS, layout.TECH_NAME_COLUMN)
    return f"You have unlocked {tech}.\n"


def daily_platinum_action(ctx: ActionContext) -> str:
    if not _flag_set(ctx, layout.PRODUCTION, layout.DAILY_PLATINUM_COLUMN):
        return ""

    peasants = ctx.number(layout.POPULATION, layout.PEASANTS_COLUMN)
    if peasants is None:
        raise CellValueError(
            layout.POPULATION,
            f"{layout.PEASANTS_COLUMN}{ctx.hour.data_row}",
            "a peasant count",
            None,
        )

    platinum = int(peasants) * ctx.settings.platinum_per_peasant
    return f"You have been awarded with {platinum} platinum.\n"


def trade_resources_action(ctx: ActionContext) -> str:
    """Describe a bank exchange: negative amounts given, positive received."""
    amounts = [
        (resource, ctx.number(layout.PRODUCTION, letters))
        for resource, letters in layout.TRADE_RESOURCES
    ]
    if all(amount is None for _, amount in amounts):
        return ""

    given: list[str] = []
    received: list[str] = []
    for resource, amount in amounts:
        if amount is None:
            continue
        whole = int(amount)
        if whole < 0:
            given.append(f"{-whole} {resource}")
        elif whole > 0:
            received.append(f"{whole} {resource}")

    if given and received:
        return f"{' and '.join(given)} have been traded for {' and '.join(received)}.\n"
    if given:
        return f"{' and '.join(given)} have been traded.\n"
    if received:
        return f"{' and '.join(received)} have been received.\n"
    return ""


def explore_action(ctx: ActionContext) -> str:
    lands = _nonzero_items(ctx, layout.EXPLORE, layout.EXPLORE_LANDS)
    if not lands:
        return ""

    platinum = format_number(
        ctx.count(layout.EXPLORE, layout.EXPLORE_PLATINUM_COST_COLUMN)
    )
    draftees = format_number(
        ctx.count(layout.EXPLORE, layout.EXPLORE_DRAFTEE_COST_COLUMN)
    )
    return (
        f"Exploration for {', '.join(lands)} begun at a cost of "
        f"{platinum} platinum and {draftees} draftees.\n"
    )


def daily_land_action(ctx: ActionContext) -> str:
    if not _flag_set(ctx, layout.EXPLORE, layout.DAILY_LAND_COLUMN):
        return ""

    column, row = layout.HOME_LAND_TYPE_CELL
    land_type = ctx.sim.cell(layout.OVERVIEW, column, row)
    return f"You have been awarded with {ctx.settings.daily_land_bonus} {land_type}.\n"


def destroy_buildings_action(ctx: ActionContext) -> str:
    buildings = _nonzero_items(ctx, layout.CONSTRUCTION, layout.DESTROY_BUILDINGS)
    if not buildings:
        return ""
    return f"Destruction of {', '.join(buildings)} is complete.\n"


def rezone_action(ctx: ActionContext) -> str:
    cost = ctx.count(layout.REZONE, layout.REZONE_PLATINUM_COST_COLUMN)
    if cost == 0:
        return ""

    # The land breakdown may legitimately be empty
    changes = _nonzero_items(ctx, layout.REZONE, layout.REZONE_LANDS)
    return (
        f"Rezoning begun at a cost of {format_number(cost)} platinum. "
        f"The changes in land are as following: {', '.join(changes)}.\n"
    )


def construction_action(ctx: ActionContext) -> str:
    buildings = _nonzero_items(ctx, layout.CONSTRUCTION, layout.CONSTRUCT_BUILDINGS)
    if not buildings:
        return ""

    platinum = format_number(
        ctx.count(layout.CONSTRUCTION, layout.CONSTRUCTION_PLATINUM_COST_COLUMN)
    )
    lumber = format_number(
        ctx.count(layout.CONSTRUCTION, layout.CONSTRUCTION_LUMBER_COST_COLUMN)
    )
    return (
        f"Construction of {', '.join(buildings)} started at a cost of "
        f"{platinum} platinum and {lumber} lumber.\n"
    )


def train_units_action(ctx: ActionContext) -> str:
    trained = []
    draftees = spies = wizards = 0
    for position, letters in enumerate(layout.TRAIN_UNIT_COLUMNS):
        amount = ctx.count(layout.MILITARY, letters)
        if amount == 0:
            continue

        if position == layout.TRAIN_SPIES_POSITION:
            spies += int(amount)
        elif position == layout.TRAIN_WIZARDS_POSITION:
            wizards += int(amount)
        else:
            draftees += int(amount)

        trained.append(f"{format_number(amount)} {_unit_name(ctx, letters)}")

    if not trained:
        return ""

    platinum = format_number(
        ctx.count(layout.MILITARY, layout.TRAIN_PLATINUM_COST_COLUMN)
    )
    ore = format_number(ctx.count(layout.MILITARY, layout.TRAIN_ORE_COST_COLUMN))
    return (
        f"Training of {', '.join(trained)} begun at a cost of {platinum} platinum, "
        f"{ore} ore, {draftees} draftees, {spies} spies, and {wizards} wizards.\n"
    )


def improvements_action(ctx: ActionContext) -> str:
    lines = []
    for amount_letters, resource_letters, target_letters in layout.IMPROVEMENTS:
        amount = ctx.count(layout.IMPS, amount_letters)
        if amount == 0:
            continue
        resource = ctx.cell(layout.IMPS, resource_letters)
        target = ctx.cell(layout.IMPS, target_letters)
        lines.append(
            f"You invested {format_number(amount)} {resource} into {target}.\n"
        )
    return "".join(lines)


ACTIONS: tuple[Action, ...] = (
    Action("tick", tick_action),
    Action("draft_rate", draft_rate_action),
    Action("release_units", release_units_action),
    Action("cast_spells", cast_spells_action),
    Action("unlock_tech", unlock_tech_action),
    Action("daily_platinum", daily_platinum_action),
    Action("trade_resources", trade_resources_action),
    Action("explore", explore_action),
    Action("daily_land", daily_land_action),
    Action("destroy_buildings", destroy_buildings_action),
    Action("rezone", rezone_action),
    Action("construction", construction_action),
    # Not implemented yet: computed every hour but kept out of the log
    Action("train_units", train_units_action, enabled=False),
    Action("improvements", improvements_action, enabled=False),
)
