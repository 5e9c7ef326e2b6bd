from experimenter.config import SimulationConfig


class Logger:
    """
    Interface for logging.
    """

    def __init__(self, session_name: str = ""):
        self.session_name = session_name

    def _prefix(self) -> str:
        return f"[{self.session_name}] " if self.session_name else ""

    def log_config(self, config: SimulationConfig):
        print("\nConfiguration:")
        print(f"  Origin: ({config.origin_x}, {config.origin_y}), heading {config.origin_heading}°")
        print(f"  Speed: {config.speed} per tick ({config.ticks_per_command} ticks per command)")
        print(f"  Frame rate: {config.fps} fps")
        print(f"  Obstacles: {len(config.obstacles)}")

    def log_program(self, queue):
        print(f"{self._prefix()}Program loaded: {len(queue)} commands")

    def log_command(self, index, command, pose):
        """Log a completed command."""
        print(f"{self._prefix()}Command {index} {command.type} done: "
              f"x={pose.x:.1f} y={pose.y:.1f} heading={pose.heading:.1f}")

    def log_reset(self, pose):
        print(f"{self._prefix()}Reset to ({pose.x:.1f}, {pose.y:.1f})")

    def log_final(self, session):
        pose = session.pose
        print("\n" + "=" * 60)
        print("Final Statistics:")
        print(f"  Frames: {session.loop.frame_count}")
        print(f"  Commands completed: {session.commands_completed}")
        print(f"  Final pose: ({pose.x:.1f}, {pose.y:.1f}), heading {pose.heading:.1f}°")
        print("=" * 60)
