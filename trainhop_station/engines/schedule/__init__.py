"""Schedule engine — channel merge dates."""

from trainhop_station.engines.schedule.gateway import ScheduleGateway, monday_on_or_before
from trainhop_station.engines.schedule.models import MergeDates

__all__ = ["MergeDates", "ScheduleGateway", "monday_on_or_before"]
