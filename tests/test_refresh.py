import random
import threading

import pytest

from arrows.models import Coordinate
from arrows.policy import default_arrow_policy
from refresh.controller import RouteRefresher
from refresh.perturbation import perturb
from refresh.policy import RefreshPolicy, default_refresh_policy
from refresh.scheduler import PeriodicTask
from refresh.state import RouteState

from helpers import straight_route_east


class MockRouteService:
    """Replays queued results; None means "no route"."""
    def __init__(self, *results):
        self.results = list(results)
        self.requests = []

    def fetch_route(self, start, end):
        self.requests.append((start, end))
        if not self.results:
            return None
        return self.results.pop(0)


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def render(self, start, end, route, arrows):
        self.calls.append((start, end, route, arrows))


@pytest.fixture
def slow_policy():
    # timers that never fire during a test
    return RefreshPolicy(interval_seconds=3600, perturb_interval_seconds=3600)


def test_default_refresh_policy():
    policy = default_refresh_policy()
    assert policy.interval_seconds == 600
    assert policy.home_start == Coordinate(28.6139, 77.2090)
    assert policy.home_end == Coordinate(28.4595, 77.0266)


def test_refresh_policy_validation():
    with pytest.raises(ValueError):
        RefreshPolicy(interval_seconds=0).validate()
    with pytest.raises(ValueError):
        RefreshPolicy(jitter_degrees=-1).validate()


def test_perturb_stays_inside_jitter_box():
    home = Coordinate(28.6139, 77.2090)
    rng = random.Random(42)
    for _ in range(200):
        moved = perturb(home, 0.01, rng)
        assert abs(moved.latitude - home.latitude) <= 0.005
        assert abs(moved.longitude - home.longitude) <= 0.005


def test_refresh_replaces_route_and_arrows(slow_policy):
    route = straight_route_east(11, 300.0)
    renderer = RecordingRenderer()
    refresher = RouteRefresher(MockRouteService(route), refresh_policy=slow_policy, renderer=renderer)

    assert refresher.refresh() is True

    snapshot = refresher.state.snapshot()
    assert snapshot.route == route
    assert len(snapshot.arrows) == 2
    assert snapshot.updated_at is not None
    assert len(renderer.calls) == 1
    start, end, rendered_route, rendered_arrows = renderer.calls[0]
    assert (start, end) == (slow_policy.home_start, slow_policy.home_end)
    assert rendered_arrows == snapshot.arrows


def test_failed_fetch_keeps_previous_state(slow_policy):
    route = straight_route_east(11, 300.0)
    renderer = RecordingRenderer()
    refresher = RouteRefresher(MockRouteService(route, None), refresh_policy=slow_policy, renderer=renderer)

    refresher.refresh()
    before = refresher.state.snapshot()

    assert refresher.refresh() is False

    after = refresher.state.snapshot()
    assert after.route == before.route
    assert after.arrows == before.arrows
    assert after.updated_at == before.updated_at
    assert len(renderer.calls) == 1


def test_new_route_discards_old_arrows(slow_policy):
    first = straight_route_east(11, 300.0)
    second = straight_route_east(3, 300.0, latitude=1.0)
    refresher = RouteRefresher(MockRouteService(first, second), refresh_policy=slow_policy)

    refresher.refresh()
    refresher.refresh()

    arrows = refresher.state.snapshot().arrows
    assert len(arrows) == 1
    assert arrows[0].position.latitude == pytest.approx(1.0 + default_arrow_policy().latitude_offset)


def test_perturbation_moves_endpoints_and_refreshes(slow_policy):
    service = MockRouteService(straight_route_east(3, 300.0))
    refresher = RouteRefresher(service, refresh_policy=slow_policy, rng=random.Random(7))

    assert refresher.perturb_endpoints() is True

    start, end = refresher.state.endpoints()
    assert start != slow_policy.home_start
    assert service.requests == [(start, end)]


def test_unchanged_endpoints_do_not_refresh():
    policy = RefreshPolicy(interval_seconds=3600, perturb_interval_seconds=3600, jitter_degrees=0.0)
    service = MockRouteService(straight_route_east(3, 300.0))
    refresher = RouteRefresher(service, refresh_policy=policy)

    assert refresher.perturb_endpoints() is False
    assert service.requests == []


def test_state_set_endpoints_reports_change():
    state = RouteState(start=Coordinate(1.0, 1.0), end=Coordinate(2.0, 2.0))
    assert state.set_endpoints(Coordinate(1.0, 1.0), Coordinate(2.0, 2.0)) is False
    assert state.set_endpoints(Coordinate(1.5, 1.0), Coordinate(2.0, 2.0)) is True


def test_periodic_task_runs_until_cancelled():
    ran = threading.Event()
    task = PeriodicTask("test", 0.01, ran.set)

    task.start()
    assert ran.wait(timeout=2)
    assert task.is_running

    task.cancel()
    assert not task.is_running
    # second cancel is harmless
    task.cancel()


def test_periodic_task_survives_action_errors():
    attempts = []
    done = threading.Event()

    def flaky():
        attempts.append(1)
        if len(attempts) == 1:
            raise RuntimeError("boom")
        done.set()

    task = PeriodicTask("flaky", 0.01, flaky)
    task.start()
    try:
        assert done.wait(timeout=2)
    finally:
        task.cancel()
    assert len(attempts) >= 2


def test_periodic_task_rejects_bad_interval():
    with pytest.raises(ValueError):
        PeriodicTask("bad", 0, lambda: None)


def test_lifecycle_start_and_stop(slow_policy):
    service = MockRouteService(straight_route_east(3, 300.0))

    with RouteRefresher(service, refresh_policy=slow_policy) as refresher:
        # mount refreshes once right away
        assert len(service.requests) == 1
        assert refresher.is_running

    assert not refresher.is_running


class BlockingFirstFetchService:
    """First fetch blocks until released; later fetches answer right away."""
    def __init__(self, first_route, later_route):
        self.first_route = first_route
        self.later_route = later_route
        self.entered = threading.Event()
        self.release = threading.Event()
        self.requests = []

    def fetch_route(self, start, end):
        self.requests.append((start, end))
        if len(self.requests) == 1:
            self.entered.set()
            self.release.wait(timeout=5)
            return self.first_route
        return self.later_route


def test_slow_fetch_for_old_endpoints_does_not_overwrite_newer_route(slow_policy):
    old_route = straight_route_east(3, 300.0)
    new_route = straight_route_east(3, 300.0, latitude=5.0)
    service = BlockingFirstFetchService(old_route, new_route)
    renderer = RecordingRenderer()
    refresher = RouteRefresher(service, refresh_policy=slow_policy, renderer=renderer, rng=random.Random(3))

    results = []
    worker = threading.Thread(target=lambda: results.append(refresher.refresh()))
    worker.start()
    assert service.entered.wait(timeout=2)

    # endpoints move while the first fetch is still in flight
    assert refresher.perturb_endpoints() is True

    service.release.set()
    worker.join(timeout=5)

    assert results == [False]
    snapshot = refresher.state.snapshot()
    assert snapshot.route == new_route
    assert service.requests[-1] == (snapshot.start, snapshot.end)
    assert len(renderer.calls) == 1
    assert renderer.calls[0][2] == new_route


def test_state_replace_drops_route_for_old_endpoints():
    old_start, old_end = Coordinate(1.0, 1.0), Coordinate(2.0, 2.0)
    state = RouteState(start=old_start, end=old_end)
    state.set_endpoints(Coordinate(1.5, 1.0), old_end)

    assert state.replace(straight_route_east(3, 300.0), [], old_start, old_end) is False
    assert state.snapshot().route == []


def test_restart_after_timed_out_cancel_runs_a_single_loop():
    release = threading.Event()
    entered = threading.Event()

    def slow_action():
        entered.set()
        release.wait(timeout=5)

    task = PeriodicTask("slow", 0.01, slow_action)
    task.start()
    assert entered.wait(timeout=2)
    old_thread = task._thread

    # the action is still blocked, join gives up
    task.cancel(timeout=0.05)
    assert old_thread.is_alive()
    assert not task.is_running

    task.start()
    new_thread = task._thread
    assert new_thread is not old_thread

    release.set()
    old_thread.join(timeout=2)
    try:
        # the old loop saw its own stop event and exited
        assert not old_thread.is_alive()
        assert new_thread.is_alive()
    finally:
        task.cancel()
    assert not task.is_running
