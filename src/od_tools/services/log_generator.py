"""Hour-by-hour log generation over a protection sim."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from od_tools.config import Settings
from od_tools.config import settings as default_settings
from od_tools.services.actions import ACTIONS, Action, ActionContext
from od_tools.services.hour_stepper import HourContext, iter_hours
from od_tools.services.sim_workbook import SimWorkbook
from od_tools.utils.exceptions import ODToolsError
from od_tools.utils.logging import LogContext, get_logger, timed_operation

logger = get_logger(__name__)

TICK_LINE_END = "======\n"


def assemble_hour(lines: Iterable[str]) -> str:
    """Join one hour's action lines into a log block.

    Empty lines are dropped and every other line ends with exactly one
    newline. A block holding nothing but the tick header yields ``""``.
    """
    block = "".join(line.rstrip("\n") + "\n" for line in lines if line)
    if not block or block.endswith(TICK_LINE_END):
        return ""
    return block


class GameLogGenerator:
    """Generate the narrative log of a protection sim.

    Usage:
        generator = GameLogGenerator(SimWorkbook.open(Path("sim.xlsm")))
        print(generator.execute())
    """

    def __init__(
        self,
        sim: SimWorkbook,
        settings: Settings | None = None,
        actions: Sequence[Action] = ACTIONS,
    ) -> None:
        self._sim = sim
        self._settings = settings or default_settings
        self._actions = tuple(actions)

    def execute(self, hour: int | None = None) -> str:
        """Build the log for every hour, or for one specific hour.

        Each reportable hour contributes its block followed by a blank line.

        Raises:
            ODToolsError: If the sim does not match the expected layout.
        """
        blocks: list[str] = []
        with timed_operation(logger, "generate_log") as metrics:
            if self._sim.source:
                metrics.custom_metrics["sim"] = self._sim.source
            for context in iter_hours(
                hour,
                last_hour=self._settings.last_hour,
                header_rows=self._settings.header_rows,
            ):
                block = self.execute_hour(context)
                metrics.hours_processed += 1
                if block:
                    blocks.append(block + "\n")
                    metrics.hours_reported += 1

        return "".join(blocks)

    def execute_hour(self, hour: HourContext) -> str:
        """Run every action for ``hour`` and assemble the result."""
        ctx = ActionContext(sim=self._sim, hour=hour, settings=self._settings)
        lines: list[str] = []

        with LogContext(hour=hour.display_hour):
            for action in self._actions:
                try:
                    line = action.extract(ctx)
                except ODToolsError as e:
                    if not action.enabled:
                        logger.debug(
                            "Skipped unfinished action",
                            action=action.name,
                            error_code=e.error_code.value,
                        )
                        continue
                    logger.error(
                        "Action failed",
                        action=action.name,
                        row=hour.data_row,
                        error_code=e.error_code.value,
                    )
                    raise

                if not action.enabled:
                    if line:
                        logger.debug(
                            "Suppressed output of unfinished action",
                            action=action.name,
                            line=line.rstrip("\n"),
                        )
                    continue
                lines.append(line)

            block = assemble_hour(lines)
            if not block:
                logger.debug("No events this hour")
        return block
