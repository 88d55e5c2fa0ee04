"""
Weather impact on routes.

Static multipliers per weather condition. Nothing here modifies the routing
graph; callers that want weather-adjusted figures apply the multipliers
themselves.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class WeatherCondition(Enum):
    CLEAR = 'CLEAR'
    CLOUDY = 'CLOUDY'
    RAIN = 'RAIN'
    STORM = 'STORM'
    SNOW = 'SNOW'


@dataclass(frozen=True)
class WeatherImpact:
    time_multiplier: float  # 1.0 = normal, >1 = slower
    cost_multiplier: float  # Fuel consumption change
    operational: bool  # Can the route be flown at all


_IMPACTS: Dict[WeatherCondition, WeatherImpact] = {
    WeatherCondition.CLEAR: WeatherImpact(1.0, 1.0, True),
    WeatherCondition.CLOUDY: WeatherImpact(1.05, 1.02, True),
    WeatherCondition.RAIN: WeatherImpact(1.15, 1.10, True),
    WeatherCondition.STORM: WeatherImpact(1.5, 1.3, False),
    WeatherCondition.SNOW: WeatherImpact(1.3, 1.2, True),
}


def get_impact(condition: WeatherCondition) -> WeatherImpact:
    """Impact of a weather condition on flight time, cost and route usability."""
    return _IMPACTS[condition]
