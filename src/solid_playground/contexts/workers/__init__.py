"""Workers context (interface segregation)."""
from .domain import Eatable, HumanWorker, RobotWorker, Workable, Worker, full_day, lunch_break, start_shift

__all__ = [
    "Eatable",
    "HumanWorker",
    "RobotWorker",
    "Workable",
    "Worker",
    "full_day",
    "lunch_break",
    "start_shift",
]
