"""Experimenter package: configuration and logging for playback sessions."""

from .config import SimulationConfig, create_default_config
from .logger import Logger

__all__ = ['SimulationConfig', 'create_default_config', 'Logger']
