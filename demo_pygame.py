"""Demo script with Pygame real-time playback of a sample robot program."""

import asyncio
from animator import PygameAnimator
from builder import RobotConfig, toggle_sensor, total_power, total_weight
from experimenter import create_default_config, Logger
from robolab import SimulationSession

SAMPLE_PROGRAM = [
    {'type': 'move_forward', 'value': 150},
    {'type': 'turn_right', 'value': 90},
    {'type': 'move_forward', 'value': 100},
    {'type': 'turn_left', 'value': 45},
    {'type': 'move_forward', 'value': 120},
]


async def main():
    """Run demo with Pygame animation."""
    print("=" * 60)
    print("RoboLab - Pygame Playback Demo")
    print("=" * 60)

    robot = RobotConfig(name="Explorer", type='rover')
    robot = toggle_sensor(robot, 'ultrasonic')
    robot = toggle_sensor(robot, 'gyro')
    print(f"Robot: {robot.name} ({robot.type}), sensors: {', '.join(robot.sensors)}")
    print(f"  Power: {total_power(robot)} mA, Weight: {total_weight(robot)} g")

    config = create_default_config()

    animator = PygameAnimator(window_size=config.window_size, robot_color=robot.color,
                              robot_name=robot.name)
    session = SimulationSession(config, render_callback=animator.render_callback,
                                logger=Logger(session_name=robot.name))

    def toggle():
        # An empty queue after a reset gets the sample program again
        if session.is_idle:
            session.load_program(SAMPLE_PROGRAM)
        session.toggle()

    animator.on_toggle = toggle
    animator.on_reset = session.reset
    animator.on_resize = session.resize
    session.loop.set_before_frame(animator.handle_events)

    print("\n" + "=" * 60)
    print("Controls:")
    print("  SPACE: Run/Pause")
    print("  R: Reset")
    print("  ESC or Q: Quit")
    print("=" * 60)

    animator.start()
    session.resize(*config.window_size)
    try:
        await session.run()
    except KeyboardInterrupt:
        print("\nPlayback interrupted by user.")
    finally:
        animator.close()
        print("\nPlayback closed.")


if __name__ == "__main__":
    asyncio.run(main())
