from dataclasses import dataclass


@dataclass(frozen=True)
class GuideConfig:
    # KEEP CONSISTENT WITH THE REAL CONTROLLER
    origin: tuple = (0.5059, 0.0, 0.4346)
    max_points: int = 200

    # Bounding box of the reference curve [m]
    traj_height: float = 0.1
    traj_width: float = 0.3
    traj_depth: float = 0.1

    # Progress bar center, the countdown text floats above it
    bar_center: tuple = (0.3, 0.0, 0.05)

    pub_freq: int = 50             # [Hz]
    max_smoothing_time: int = 5    # [seconds]

    base_frame: str = "/panda_link0"
    tcp_frame: str = "/panda_hand_tcp"
    namespace: str = "marker_publisher"

    marker_topic: str = "visualization_marker_array"
    position_topic: str = "tcp_position"
    countdown_topic: str = "countdown"
    qos_depth: int = 10

    @property
    def timer_period(self):
        return 1.0 / self.pub_freq


DEFAULT_CONFIG = GuideConfig()
