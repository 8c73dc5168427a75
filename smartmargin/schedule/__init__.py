from .adjustments import adjust_date, apply_spot_lag
from .core import Schedule, SchedulePeriod
from .generator import ScheduleGenerator, create_schedule, create_schedule_from_conventions

__all__ = [
    "adjust_date",
    "apply_spot_lag",
    "Schedule",
    "SchedulePeriod",
    "ScheduleGenerator",
    "create_schedule",
    "create_schedule_from_conventions",
]
