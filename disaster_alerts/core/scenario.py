"""Built-in demo scenario.

Four users in three states and one disaster of each kind. Used when no
scenario file is configured.
"""

from disaster_alerts.core.config import Config, DisasterSpec, UserSpec
from disaster_alerts.core.disaster import (
    EarthquakeDetails,
    FloodDetails,
    HurricaneDetails,
    WildfireDetails,
)


def demo_users() -> list[UserSpec]:
    return [
        UserSpec("U001", "Alice Johnson", "California", ["Earthquake", "Wildfire"]),
        UserSpec("U002", "Bob Smith", "Florida", ["Hurricane", "Flood"]),
        UserSpec("U003", "Carol Davis", "Texas", ["Earthquake", "Hurricane"]),
        UserSpec("U004", "David Wilson", "California", ["Earthquake", "Wildfire"]),
    ]


def demo_disasters() -> list[DisasterSpec]:
    return [
        DisasterSpec(
            kind="Earthquake",
            location="California",
            severity=8,
            description="Moderate shaking expected in Southern California",
            details=EarthquakeDetails(magnitude=6.5, depth_km=10.0),
        ),
        DisasterSpec(
            kind="Hurricane",
            location="Florida",
            severity=9,
            description="Evacuation orders for coastal areas",
            details=HurricaneDetails(wind_speed_kmh=185.0, category="Category 4"),
        ),
        DisasterSpec(
            kind="Flood",
            location="Texas",
            severity=6,
            description="Heavy rainfall causing river overflow",
            details=FloodDetails(water_level_m=3.2, affected_areas="River basin areas"),
        ),
        DisasterSpec(
            kind="Wildfire",
            location="California",
            severity=7,
            description="Strong winds spreading fire rapidly",
            details=WildfireDetails(
                area_affected_sq_km=150.5,
                containment_status="25% contained",
            ),
        ),
    ]


def demo_config() -> Config:
    """Return the demo configuration (permissive validation)."""
    return Config(users=demo_users(), disasters=demo_disasters())
