"""Robot configuration record and the sensor catalog used by the builder."""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Tuple

CHASSIS_TYPES = ('rover', 'arm', 'drone')

BASE_POWER = 20  # mA drawn by the controller board
BASE_WEIGHT = 500  # grams of bare chassis


@dataclass(frozen=True)
class SensorSpec:
    """Catalog entry for one sensor."""
    id: str
    name: str
    description: str
    power: int  # mA
    weight: int  # grams


SENSOR_CATALOG: Dict[str, SensorSpec] = {
    'ultrasonic': SensorSpec('ultrasonic', "Ultrasonic sensor", "Measures distance to avoid obstacles.", 5, 10),
    'infrared': SensorSpec('infrared', "Line tracking sensor", "Detects black/white lines on the floor.", 3, 5),
    'color': SensorSpec('color', "Color sensor", "Recognizes the color of objects and surfaces.", 4, 8),
    'gyro': SensorSpec('gyro', "Gyroscope", "Measures heading and rotation angles.", 2, 5),
    'camera': SensorSpec('camera', "AI camera", "Recognizes shapes and faces (advanced).", 15, 25),
}

# Settings applied the first time a sensor is selected
DEFAULT_SENSOR_SETTINGS: Dict[str, Dict[str, Any]] = {
    'ultrasonic': {'range': 200},
    'infrared': {'sensitivity': 50},
    'color': {'illumination': True},
    'gyro': {'axis': '3-axis'},
    'camera': {'resolution': '720p'},
}


def _check_range(value, low, high, step=1):
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    return low <= value <= high and (value - low) % step == 0


_SETTING_VALIDATORS = {
    ('ultrasonic', 'range'): lambda v: _check_range(v, 50, 400, 10),
    ('infrared', 'sensitivity'): lambda v: _check_range(v, 0, 100),
    ('color', 'illumination'): lambda v: isinstance(v, bool),
    ('gyro', 'axis'): lambda v: v in ('3-axis', '6-axis'),
    ('camera', 'resolution'): lambda v: v in ('720p', '1080p'),
}


@dataclass(frozen=True)
class RobotConfig:
    """Robot assembled in the builder."""
    name: str = "My Robot"
    type: str = 'rover'
    sensors: Tuple[str, ...] = ()
    sensor_config: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    color: str = "#10b981"

    def __post_init__(self):
        if self.type not in CHASSIS_TYPES:
            raise ValueError(f"Unknown chassis type: {self.type}")
        for sensor_id in self.sensors:
            _require_sensor(sensor_id)
        object.__setattr__(self, 'sensors', tuple(self.sensors))

    def has_sensor(self, sensor_id: str) -> bool:
        return sensor_id in self.sensors


def _require_sensor(sensor_id: str):
    if sensor_id not in SENSOR_CATALOG:
        raise ValueError(f"Unknown sensor: {sensor_id}")


def toggle_sensor(config: RobotConfig, sensor_id: str) -> RobotConfig:
    """
    Select or deselect a sensor.

    Selecting a sensor for the first time fills in its default settings;
    settings of a deselected sensor are kept for when it comes back.
    """
    _require_sensor(sensor_id)
    if config.has_sensor(sensor_id):
        sensors = tuple(s for s in config.sensors if s != sensor_id)
        return replace(config, sensors=sensors)

    sensor_config = dict(config.sensor_config)
    if sensor_id not in sensor_config:
        sensor_config[sensor_id] = dict(DEFAULT_SENSOR_SETTINGS[sensor_id])
    return replace(config, sensors=config.sensors + (sensor_id,), sensor_config=sensor_config)


def update_sensor_config(config: RobotConfig, sensor_id: str, key: str, value: Any) -> RobotConfig:
    """Set one setting of a sensor, merging with its other settings."""
    _require_sensor(sensor_id)
    validator = _SETTING_VALIDATORS.get((sensor_id, key))
    if validator is None:
        raise ValueError(f"Sensor {sensor_id} has no setting {key!r}")
    if not validator(value):
        raise ValueError(f"Invalid value for {sensor_id}.{key}: {value!r}")

    sensor_config = dict(config.sensor_config)
    sensor_config[sensor_id] = {**sensor_config.get(sensor_id, {}), key: value}
    return replace(config, sensor_config=sensor_config)


def selected_specs(config: RobotConfig) -> List[SensorSpec]:
    # Catalog order, not selection order
    return [spec for sensor_id, spec in SENSOR_CATALOG.items() if config.has_sensor(sensor_id)]


def total_power(config: RobotConfig) -> int:
    return BASE_POWER + sum(spec.power for spec in selected_specs(config))


def total_weight(config: RobotConfig) -> int:
    return BASE_WEIGHT + sum(spec.weight for spec in selected_specs(config))
