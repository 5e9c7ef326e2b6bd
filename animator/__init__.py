"""Animator package for the RoboLab playback preview."""

from .pygame_animator import PygameAnimator

__all__ = ['PygameAnimator']
