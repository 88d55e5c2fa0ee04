"""
Flight planning: booking routes as flights and checking aircraft schedules.
"""

from .flight_planner import FlightPlanner, estimate
from .scheduling import TimeSlot, can_schedule, detect_conflicts, generate_gantt_data, estimated_arrival

__all__ = [
    'FlightPlanner',
    'estimate',
    'TimeSlot',
    'can_schedule',
    'detect_conflicts',
    'generate_gantt_data',
    'estimated_arrival',
]
