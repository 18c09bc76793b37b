"""Tests for the application coordinator and command line entry point."""

import io
import random
from datetime import datetime
from unittest.mock import patch

import pytest

from countdown_app import cli
from countdown_app.app import CountdownApp
from countdown_app.config.defaults import get_default_config
from countdown_app.persistence.date_store import MemoryDateStore
from countdown_app.presentation.base import Region
from countdown_app.presentation.console import ConsoleView
from countdown_app.state.states import Arrived, Countdown, SelectDate
from countdown_app.timing.clock import ManualClock
from countdown_app.timing.scheduler import LoopScheduler


class TestCountdownApp:
    """Test user level flows driven through the app."""

    def test_fresh_start_asks_for_a_date(self, app, view):
        state = app.start()

        assert isinstance(state, SelectDate)
        assert app.state is state
        assert view.visible == {Region.SELECT}

    def test_select_change_and_select_again(self, app, view, store, at):
        app.start()
        app.select_date(at(600))
        assert isinstance(app.state, Countdown)

        app.change_date()

        assert isinstance(app.state, SelectDate)
        assert store.get() is None
        assert view.fragments == {}

        app.select_date(at(60))
        assert view.fragments == {"second": 0, "minute": 1}

    def test_finish_countdown_arrives_after_shortcut(self, app, scheduler, view, config, at):
        app.start()
        app.select_date(at(86400))

        app.finish_countdown()
        scheduler.advance(config.timing.finish_shortcut_seconds)

        assert isinstance(app.state, Arrived)
        assert len(view.celebrations) == 1

    def test_start_resumes_persisted_countdown(self, store, view, clock, scheduler, start_ms):
        store.set(start_ms + 2000)
        app = CountdownApp(store=store, view=view, clock=clock, scheduler=scheduler)

        assert isinstance(app.start(), Countdown)

        scheduler.advance(2)
        assert isinstance(app.state, Arrived)

    def test_stop_releases_state(self, app, scheduler, at):
        app.start()
        app.select_date(at(30))

        app.stop()

        assert app.state is None
        assert scheduler.pending == []

    def test_run_requires_loop_scheduler(self, app):
        with pytest.raises(TypeError):
            app.run()

    def test_run_drives_loop_scheduler_to_arrival(self, store):
        clock = ManualClock(datetime(2024, 1, 1).timestamp() * 1000)
        scheduler = LoopScheduler(timefunc=lambda: clock.now_ms() / 1000, delayfunc=clock.advance)
        stream = io.StringIO()
        app = CountdownApp(store=store, view=ConsoleView(stream), clock=clock,
                           scheduler=scheduler, rng=random.Random(0))
        app.start()

        app.select_date(datetime(2024, 1, 1, 0, 0, 3))
        app.run()

        assert isinstance(app.state, Arrived)
        lines = stream.getvalue().splitlines()
        assert lines[:5] == [
            "Select the target date (yyyy-mm-dd)",
            "Counting down",
            "3 seconds",
            "2 seconds",
            "1 second",
        ]
        assert lines[5] == "The day has arrived!"

    def test_defaults_to_configured_store(self):
        config = get_default_config()
        app = CountdownApp(config=config)

        assert isinstance(app.machine.store, MemoryDateStore)
        assert isinstance(app.machine.view, ConsoleView)
        assert isinstance(app.machine.scheduler, LoopScheduler)


class TestCli:
    """Test argument handling in the entry point."""

    def test_parser_defaults(self):
        args = cli.build_parser().parse_args([])

        assert args.date is None
        assert args.finish is False
        assert cli.build_overrides(args) == {}

    def test_overrides_from_flags(self):
        args = cli.build_parser().parse_args(["--db", "target.db", "--log-level", "debug", "--json-logs"])

        assert cli.build_overrides(args) == {
            "storage": {"backend": "sqlite", "db_path": "target.db"},
            "logging": {"level": "DEBUG", "format_json": True},
        }

    def test_invalid_config_exits_with_usage_error(self, tmp_path, capsys):
        (tmp_path / "countdown.yaml").write_text("timing:\n  tick_interval_seconds: -1\n")

        assert cli.main(["--config-dir", str(tmp_path)]) == 2
        assert "tick_interval_seconds" in capsys.readouterr().err

    def test_end_of_input_while_selecting(self, tmp_path):
        with patch("countdown_app.cli.configure_logging"), \
                patch("countdown_app.cli.CountdownApp") as app_cls, \
                patch("builtins.input", side_effect=EOFError):
            app = app_cls.return_value
            app.state = SelectDate.__new__(SelectDate)

            assert cli.main(["--config-dir", str(tmp_path)]) == 1

        app.stop.assert_called_once()
        app.run.assert_not_called()

    def test_date_flag_is_entered_then_run(self, tmp_path):
        with patch("countdown_app.cli.configure_logging"), \
                patch("countdown_app.cli.CountdownApp") as app_cls:
            app = app_cls.return_value
            app.state = SelectDate.__new__(SelectDate)

            def enter(text):
                app.state = Countdown.__new__(Countdown)

            app.enter_date.side_effect = enter

            assert cli.main(["--config-dir", str(tmp_path), "--date", "2099-01-01", "--finish"]) == 0

        app.change_date.assert_not_called()
        app.enter_date.assert_called_once_with("2099-01-01")
        app.finish_countdown.assert_called_once()
        app.run.assert_called_once()

    def test_keyboard_interrupt_stops_app(self, tmp_path):
        with patch("countdown_app.cli.configure_logging"), \
                patch("countdown_app.cli.CountdownApp") as app_cls:
            app = app_cls.return_value
            app.state = Countdown.__new__(Countdown)
            app.run.side_effect = KeyboardInterrupt

            assert cli.main(["--config-dir", str(tmp_path)]) == 130

        app.stop.assert_called_once()
