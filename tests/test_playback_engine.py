import logging
import threading

import pytest

from qwop_ai.input.playback_engine import PlaybackEngine, PlaybackStatus

from conftest import FakeEnvironment

def never():
    return False

def test_preset_stop_sends_nothing(fake_env):
    stop = threading.Event()
    stop.set()

    status = PlaybackEngine(fake_env).play("QW+qw+", never, stop)

    assert status is PlaybackStatus.STOPPED
    assert fake_env.events == []
    assert fake_env.sleeps == []

def test_plays_notes_in_order(fake_env):
    engine = PlaybackEngine(fake_env)

    status = engine.play("QO+q+o", never, threading.Event())

    assert status is PlaybackStatus.COMPLETED
    assert fake_env.key_events() == [
        ("press", "q"), ("press", "o"), ("release", "q"), ("release", "o"),
    ]
    assert fake_env.sleeps == [100, 100]
    assert engine.waits_played == 2

def test_repeated_press_is_sent_once(fake_env):
    engine = PlaybackEngine(fake_env)

    engine.play("PP+p", never, threading.Event())

    assert fake_env.key_events() == [("press", "p"), ("release", "p")]

def test_release_of_idle_channel_still_sent(fake_env):
    PlaybackEngine(fake_env).play("w", never, threading.Event())

    assert fake_env.key_events() == [("release", "w")]

def test_unknown_note_is_skipped_with_warning(fake_env, caplog):
    engine = PlaybackEngine(fake_env)

    with caplog.at_level(logging.WARNING):
        status = engine.play("QxR+q", never, threading.Event())

    assert status is PlaybackStatus.COMPLETED
    assert fake_env.key_events() == [("press", "q"), ("release", "q")]
    assert engine.unknown_notes == 2
    assert "Unknown note: 'x'" in caplog.text

def test_finish_is_polled_after_each_wait():
    env = FakeEnvironment(finish_after_ticks=2)
    engine = PlaybackEngine(env)

    status = engine.play("Q+W+O+P+", lambda: env.finished, threading.Event())

    assert status is PlaybackStatus.FINISHED
    assert env.key_events() == [("press", "q"), ("press", "w")]
    assert engine.waits_played == 2

def test_stop_during_wait_ends_after_that_wait():
    stop = threading.Event()
    env = FakeEnvironment(on_tick=lambda tick: stop.set())
    engine = PlaybackEngine(env)

    status = engine.play("Q+q+", never, stop)

    assert status is PlaybackStatus.STOPPED
    assert env.key_events() == [("press", "q")]
    assert engine.get_stats()['pressed'] == ["q"]

def test_state_carries_over_between_plays(fake_env):
    engine = PlaybackEngine(fake_env)

    engine.play("Q+", never, threading.Event())
    engine.play("Q+", never, threading.Event())

    assert fake_env.key_events() == [("press", "q")]

def test_release_all_sends_every_channel(fake_env):
    engine = PlaybackEngine(fake_env)
    engine.play("QP", never, threading.Event())

    engine.release_all()

    assert fake_env.key_events()[-4:] == [
        ("release", "q"), ("release", "w"), ("release", "o"), ("release", "p"),
    ]
    assert engine.get_stats()['pressed'] == []

def test_custom_keys_and_tick(fake_env):
    engine = PlaybackEngine(fake_env, channel_keys=["a", "s", "k", "l"], tick_ms=40)

    engine.play("S+s", never, threading.Event())

    assert fake_env.key_events() == [("press", "s"), ("release", "s")]
    assert fake_env.sleeps == [40]

def test_wrong_number_of_keys_rejected(fake_env):
    with pytest.raises(ValueError):
        PlaybackEngine(fake_env, channel_keys=["a", "b"])
