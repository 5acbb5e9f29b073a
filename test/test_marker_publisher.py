import pytest

rclpy = pytest.importorskip("rclpy")
pytest.importorskip("std_msgs.msg")
pytest.importorskip("geometry_msgs.msg")
visualization_msgs = pytest.importorskip("visualization_msgs.msg")

Time = pytest.importorskip("builtin_interfaces.msg").Time
from rclpy.parameter import Parameter
from std_msgs.msg import Float64, Float64MultiArray
from tracking_markers.marker_publisher import MarkerPublisher, to_marker_array

Marker = visualization_msgs.Marker


def test_marker_array_from_snapshot(composer, trajectory):
    snapshot = composer.compose((0.0, 0.0, 0.0), 0)
    stamp = Time(sec=12, nanosec=5)
    msg = to_marker_array(snapshot, stamp)

    assert [m.id for m in msg.markers] == [2, 1, 0, 10]
    assert [m.type for m in msg.markers] == [
        Marker.LINE_STRIP, Marker.SPHERE, Marker.SPHERE, Marker.TEXT_VIEW_FACING]
    for m in msg.markers:
        assert m.ns == "marker_publisher"
        assert m.action == Marker.ADD
        assert m.header.stamp == stamp
        assert m.pose.orientation.w == 1.0

    traj = msg.markers[0]
    assert traj.header.frame_id == "/panda_link0"
    assert len(traj.points) == len(trajectory)
    assert traj.points[0].y == pytest.approx(-0.15)

    ref = msg.markers[2]
    assert ref.pose.position.x == pytest.approx(trajectory[0][0])

    text = msg.markers[3]
    assert text.text == "Go!"
    assert (text.color.r, text.color.g, text.color.a) == (0.0, 1.0, 1.0)


def test_marker_array_without_countdown(composer):
    msg = to_marker_array(composer.compose((0.6, 0.0, 0.4), -5), Time())
    assert [m.id for m in msg.markers] == [2, 1, 0]
    assert msg.markers[1].header.frame_id == "/panda_hand_tcp"


class _Recorder:
    def __init__(self):
        self.messages = []
        self.lines = {"info": [], "warn": [], "error": []}

    def publish(self, msg):
        self.messages.append(msg)

    def info(self, text):
        self.lines["info"].append(text)

    def warn(self, text):
        self.lines["warn"].append(text)

    def error(self, text):
        self.lines["error"].append(text)


@pytest.fixture
def ros_context():
    rclpy.init()
    yield
    rclpy.shutdown()


def _make_node(monkeypatch, traj_id):
    log = _Recorder()
    monkeypatch.setattr(MarkerPublisher, "get_logger", lambda self: log)
    node = MarkerPublisher(parameter_overrides=[
        Parameter("traj_id", Parameter.Type.INTEGER, traj_id),
        Parameter("part_id", Parameter.Type.INTEGER, 17),
    ])
    node.marker_pub = _Recorder()
    return node, log


def test_unknown_traj_id_warns_and_draws_flat_line(ros_context, monkeypatch):
    node, log = _make_node(monkeypatch, 9)
    try:
        assert node.params.traj_id == 9
        assert node.params.part_id == 17
        assert any("9" in line for line in log.lines["warn"])
        z = node.composer.trajectory[:, 2]
        assert (z == z[0]).all()
    finally:
        node.destroy_node()


def test_known_traj_id_does_not_warn(ros_context, monkeypatch):
    node, log = _make_node(monkeypatch, 2)
    try:
        assert log.lines["warn"] == []
    finally:
        node.destroy_node()


def test_callbacks_feed_published_markers(ros_context, monkeypatch):
    node, log = _make_node(monkeypatch, 9)
    try:
        node.ref_callback(Float64MultiArray(data=[0.6, 0.1]))
        assert node.state.read().reference == (0.0, 0.0, 0.0)
        assert len(log.lines["error"]) == 1

        node.ref_callback(Float64MultiArray(data=[0.6, 0.1, 0.45]))
        node.count_callback(Float64(data=2.0))
        assert node.state.read().reference == (0.6, 0.1, 0.45)
        assert node.state.read().countdown == 3

        node.marker_callback()
        msg = node.marker_pub.messages[-1]
        assert [m.id for m in msg.markers] == [2, 1, 0, 10]
        assert msg.markers[2].pose.position.x == pytest.approx(0.6)
        assert msg.markers[3].text == "3"

        node.count_callback(Float64(data=7.0))
        node.marker_callback()
        assert [m.id for m in node.marker_pub.messages[-1].markers] == [2, 1, 0]
    finally:
        node.destroy_node()


def test_non_finite_elapsed_does_not_stop_node(ros_context, monkeypatch):
    node, _ = _make_node(monkeypatch, 0)
    try:
        node.count_callback(Float64(data=float("nan")))
        node.count_callback(Float64(data=float("inf")))
        node.marker_callback()
        assert node.marker_pub.messages[-1].markers[3].text == "5"
    finally:
        node.destroy_node()
