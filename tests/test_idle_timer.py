import pytest

from idle_counter.build_events import BuildEvents
from idle_counter.idle_timer import IdleTimer
from idle_counter.preference_store import PreferenceStore

START_KEY = "AwesomeProject_LastIdleStartTime"
COMPILE_KEY = "AwesomeProject_LastCompileIdleTime"
OVERALL_KEY = "AwesomeProject_OverallIdleTime"


@pytest.fixture
def events():
    return BuildEvents()


@pytest.fixture
def timer(store, settings, clock):
    return IdleTimer(store, settings, clock=clock)


def _run_cycle(timer, events, clock, compile_seconds, reload_seconds):
    timer.attach(events)
    events.start_compilation()
    clock.now += compile_seconds
    events.finish_compilation()
    clock.now += reload_seconds
    events.finish_reload()


def test_full_cycle_accumulates_idle_time(timer, events, clock, store, log_messages):
    measured = []
    timer.idleMeasured.connect(lambda idle, compile_, overall: measured.append((idle, compile_, overall)))

    _run_cycle(timer, events, clock, compile_seconds=5.0, reload_seconds=0.0)

    assert store.get_float(OVERALL_KEY) == pytest.approx(5.0)
    assert not store.has_key(START_KEY)
    assert not store.has_key(COMPILE_KEY)
    assert measured == [pytest.approx((5.0, 5.0, 5.0))]
    summary = [message for message in log_messages if message.startswith("Your idle time")]
    assert summary == [
        "Your idle time was 5.00 [s] (CompileTime: 5.00 [s]). "
        "Your overall idle time on AwesomeProject was 5.00 [s]"
    ]


def test_compile_finish_records_compile_delta(timer, events, clock, store):
    timer.attach(events)
    events.start_compilation()
    assert store.get_float(START_KEY) == pytest.approx(100.0)

    clock.now = 107.5
    events.finish_compilation()
    assert store.get_float(COMPILE_KEY) == pytest.approx(7.5)


def test_overall_idle_time_is_sum_of_cycles(timer, events, clock, store):
    deltas = [(2.0, 1.0), (30.0, 4.5), (61.0, 0.25)]
    for compile_seconds, reload_seconds in deltas:
        _run_cycle(timer, events, clock, compile_seconds, reload_seconds)

    expected = sum(compile_seconds + reload_seconds for compile_seconds, reload_seconds in deltas)
    assert store.get_float(OVERALL_KEY) == pytest.approx(expected)


def test_handlers_are_one_shot(timer, events, clock, store):
    _run_cycle(timer, events, clock, compile_seconds=1.0, reload_seconds=1.0)
    assert not timer.is_attached

    events.start_compilation()
    assert not store.has_key(START_KEY)


def test_finish_and_reload_without_start_do_nothing(timer, events, clock, store, log_messages):
    timer.attach(events)
    clock.now = 200.0
    events.finish_compilation()
    events.finish_reload()

    assert not store.has_key(START_KEY)
    assert not store.has_key(COMPILE_KEY)
    assert not store.has_key(OVERALL_KEY)
    assert not any(message.startswith("Your idle time") for message in log_messages)


def test_reload_without_compile_finish_uses_zero_compile_time(timer, events, clock, store, log_messages):
    timer.attach(events)
    events.start_compilation()
    clock.now += 3.0
    events.finish_reload()

    assert store.get_float(OVERALL_KEY) == pytest.approx(3.0)
    assert any("CompileTime: 0.00 [s]" in message for message in log_messages)


def test_negative_duration_is_discarded(timer, store, clock):
    store.set_float(START_KEY, 500.0)
    store.set_float(OVERALL_KEY, 10.0)
    clock.now = 20.0

    timer.on_reload_finished()

    assert store.get_float(OVERALL_KEY) == pytest.approx(10.0)
    assert not store.has_key(START_KEY)


def test_inactive_timer_neither_subscribes_nor_records(store, settings, clock, events):
    settings.active = False
    timer = IdleTimer(store, settings, clock=clock)

    assert timer.attach(events) is False
    events.start_compilation()
    timer.on_compilation_started()
    assert not store.has_key(START_KEY)


def test_disabling_mid_cycle_stops_accumulation(timer, events, clock, store, settings):
    timer.attach(events)
    events.start_compilation()
    settings.active = False
    clock.now += 4.0
    events.finish_compilation()
    events.finish_reload()

    assert not store.has_key(OVERALL_KEY)
    assert not timer.is_attached


def test_clock_provider_can_be_replaced(timer, events, store):
    timer.set_clock_provider(lambda: 42.0)
    timer.attach(events)
    events.start_compilation()
    assert store.get_float(START_KEY) == pytest.approx(42.0)


def test_detach_disconnects_pending_handlers(timer, events, store):
    timer.attach(events)
    timer.detach()
    events.start_compilation()
    assert not store.has_key(START_KEY)


def test_zero_start_time_is_treated_as_never_started(timer, store, clock, log_messages):
    store.set_float(START_KEY, 0.0)
    clock.now = 50.0

    timer.on_compilation_finished()
    timer.on_reload_finished()

    assert not store.has_key(COMPILE_KEY)
    assert not store.has_key(OVERALL_KEY)
    assert not any(message.startswith("Your idle time") for message in log_messages)


def test_corrupt_overall_total_restarts_from_zero(settings, clock, settings_file):
    settings_file.write_text("[General]\nAwesomeProject_OverallIdleTime=nan\n", encoding="utf-8")
    store = PreferenceStore(settings_file=settings_file)
    timer = IdleTimer(store, settings, clock=clock)
    store.set_float(START_KEY, 50.0)
    clock.now = 53.0

    timer.on_reload_finished()

    assert store.get_float(OVERALL_KEY) == pytest.approx(3.0)
