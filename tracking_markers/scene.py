from dataclasses import dataclass
from enum import Enum

from tracking_markers.config import DEFAULT_CONFIG

REF_MARKER_ID = 0
TCP_MARKER_ID = 1
TRAJ_MARKER_ID = 2
COUNTDOWN_TEXT_ID = 10

STOP_COUNT = -10

TCP_MARKER_SIZE = 0.015   # 1.5 cm sphere
TRAJ_LINE_WIDTH = 0.015
TEXT_HEIGHT = 0.2         # height of 'A'
TEXT_LIFT = 0.05          # above the progress bar center

RED = (1.0, 0.0, 0.0)
GREEN = (0.0, 1.0, 0.0)
BLUE = (0.0, 0.0, 1.0)
YELLOW = (1.0, 1.0, 0.0)
BLACK = (0.0, 0.0, 0.0)


class MarkerShape(Enum):
    SPHERE = "sphere"
    LINE_STRIP = "line_strip"
    TEXT_VIEW_FACING = "text_view_facing"


class CountdownDisplay(Enum):
    HIDDEN = "hidden"
    COUNTING = "counting"
    GO = "go"
    STOP = "stop"


def countdown_display(count):
    if count == STOP_COUNT:
        return CountdownDisplay.STOP
    if count == 0:
        return CountdownDisplay.GO
    if count > 0:
        return CountdownDisplay.COUNTING
    return CountdownDisplay.HIDDEN


def countdown_text(count):
    """Returns (text, rgb) for a visible countdown value."""
    display = countdown_display(count)
    if display is CountdownDisplay.HIDDEN:
        raise ValueError(f"countdown {count} is not displayed")
    if display is CountdownDisplay.STOP:
        return "Stop!", RED
    if display is CountdownDisplay.GO:
        return "Go!", GREEN
    if count in (1, 2):
        return str(count), YELLOW
    if count in (3, 4, 5):
        return str(count), RED
    # beyond the smoothing window there is no color entry
    return str(count), BLACK


@dataclass(frozen=True)
class MarkerSpec:
    marker_id: int
    frame_id: str
    shape: MarkerShape
    scale: tuple
    color: tuple    # (r, g, b, a)
    position: tuple = (0.0, 0.0, 0.0)
    points: object = None
    text: str = ""


@dataclass(frozen=True)
class SceneSnapshot:
    markers: tuple

    def by_id(self, marker_id):
        for marker in self.markers:
            if marker.marker_id == marker_id:
                return marker
        return None

    @property
    def ids(self):
        return [marker.marker_id for marker in self.markers]


class SceneComposer:
    def __init__(self, trajectory, origin=DEFAULT_CONFIG.origin, bar_center=DEFAULT_CONFIG.bar_center,
                 base_frame=DEFAULT_CONFIG.base_frame, tcp_frame=DEFAULT_CONFIG.tcp_frame):
        if len(trajectory) == 0:
            raise ValueError("trajectory must hold at least one point")

        self.origin = tuple(float(v) for v in origin)
        self.bar_center = tuple(float(v) for v in bar_center)
        self.base_frame = base_frame
        self.tcp_frame = tcp_frame

        # Static line, built once
        self.traj_marker = MarkerSpec(
            marker_id=TRAJ_MARKER_ID,
            frame_id=base_frame,
            shape=MarkerShape.LINE_STRIP,
            scale=(TRAJ_LINE_WIDTH, 0.0, 0.0),   # LINE_STRIP uses only scale.x
            color=BLUE + (0.2,),
            points=trajectory,
        )
        self.tcp_marker = MarkerSpec(
            marker_id=TCP_MARKER_ID,
            frame_id=tcp_frame,
            shape=MarkerShape.SPHERE,
            scale=(TCP_MARKER_SIZE,) * 3,
            color=RED + (1.0,),
        )

    @property
    def trajectory(self):
        return self.traj_marker.points

    def compose(self, reference, countdown):
        markers = [self.traj_marker, self.tcp_marker, self.ref_marker(reference)]

        # display countdown numbers during smoothing, and the stop sign
        text = self.countdown_marker(countdown)
        if text is not None:
            markers.append(text)

        return SceneSnapshot(markers=tuple(markers))

    def ref_marker(self, reference):
        x, y, z = reference

        # d: 0.1 at closest, 0.0 at farthest
        if x != 0.0:
            d = x - self.origin[0] + 0.05
            position = (x, y, z)
        else:
            d = 0.1
            first = self.trajectory[0]
            position = (float(first[0]), float(first[1]), float(first[2]))

        size = 0.015 + d / 20
        return MarkerSpec(
            marker_id=REF_MARKER_ID,
            frame_id=self.base_frame,
            shape=MarkerShape.SPHERE,
            scale=(size, size, size),
            color=GREEN + (0.35,),
            position=position,
        )

    def countdown_marker(self, count):
        if countdown_display(count) is CountdownDisplay.HIDDEN:
            return None

        text, rgb = countdown_text(count)
        cx, cy, cz = self.bar_center
        return MarkerSpec(
            marker_id=COUNTDOWN_TEXT_ID,
            frame_id=self.base_frame,
            shape=MarkerShape.TEXT_VIEW_FACING,
            scale=(0.0, 0.0, TEXT_HEIGHT),
            color=rgb + (1.0,),
            position=(cx, cy, cz + TEXT_LIFT),
            text=text,
        )
