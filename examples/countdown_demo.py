#!/usr/bin/env python3
"""
Countdown Demo

This script walks the countdown through its whole life cycle without
waiting in real time. It shows how to:
- Build the app with a manual clock and scheduler
- Enter a date, including rejected entries
- Change the date and use the finish shortcut
- Resume a persisted countdown after a restart

Run: python examples/countdown_demo.py
"""

import random
from datetime import datetime

from countdown_app.app import CountdownApp
from countdown_app.logging.config import configure_logging
from countdown_app.persistence.date_store import MemoryDateStore
from countdown_app.presentation.console import ConsoleView
from countdown_app.timing.clock import ManualClock
from countdown_app.timing.scheduler import ManualScheduler


def build_app(store: MemoryDateStore, clock: ManualClock, scheduler: ManualScheduler) -> CountdownApp:
    return CountdownApp(
        store=store,
        view=ConsoleView(width=60),
        clock=clock,
        scheduler=scheduler,
        rng=random.Random(2024),
    )


def main() -> None:
    configure_logging(level="WARNING")

    start = datetime(2030, 1, 1, 9, 0)
    clock = ManualClock(start.timestamp() * 1000)
    scheduler = ManualScheduler(clock)
    store = MemoryDateStore()

    print("1. Fresh start")
    app = build_app(store, clock, scheduler)
    app.start()

    print("\n2. Rejected entries")
    for text in ("01/02/2030", "2030-02-30", "2029-12-31"):
        print(f"> {text}")
        app.enter_date(text)

    print("\n3. A valid date, then a few ticks")
    app.enter_date("2030-01-02")
    scheduler.advance(3)

    print("\n4. Restart with the date still persisted")
    app.stop()
    app = build_app(store, clock, scheduler)
    app.start()

    print("\n5. Change the date, then take the finish shortcut")
    app.change_date()
    app.select_date(datetime(2031, 1, 1))
    app.finish_countdown()
    scheduler.advance(10)


if __name__ == "__main__":
    main()
