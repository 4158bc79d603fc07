"""Services for reading a protection sim and generating its log."""

from od_tools.services.actions import ACTIONS, Action, ActionContext
from od_tools.services.hour_stepper import HourContext, iter_hours
from od_tools.services.log_generator import GameLogGenerator, assemble_hour
from od_tools.services.sim_workbook import SimWorkbook

__all__ = [
    "ACTIONS",
    "Action",
    "ActionContext",
    "GameLogGenerator",
    "HourContext",
    "SimWorkbook",
    "assemble_hour",
    "iter_hours",
]
