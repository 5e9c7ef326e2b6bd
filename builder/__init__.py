"""Robot builder: configuration record, sensor catalog and stats."""

from .robot_config import (
    CHASSIS_TYPES,
    DEFAULT_SENSOR_SETTINGS,
    SENSOR_CATALOG,
    RobotConfig,
    SensorSpec,
    toggle_sensor,
    total_power,
    total_weight,
    update_sensor_config,
)

__all__ = [
    'CHASSIS_TYPES',
    'DEFAULT_SENSOR_SETTINGS',
    'SENSOR_CATALOG',
    'RobotConfig',
    'SensorSpec',
    'toggle_sensor',
    'total_power',
    'total_weight',
    'update_sensor_config',
]
