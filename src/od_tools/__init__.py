"""Open Dominion tools - narrative logs from protection sim workbooks."""

from od_tools.services import GameLogGenerator, SimWorkbook

__all__ = ["GameLogGenerator", "SimWorkbook"]
__version__ = "0.1.0"


def main() -> None:
    """Run the command line interface."""
    from od_tools.main import app

    app()
