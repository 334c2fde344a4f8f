from __future__ import annotations

import queue
import threading
from datetime import datetime
from typing import Callable, Iterator, Optional

import pytz
from apscheduler.schedulers.background import BackgroundScheduler

# 2-digit 24-hour clock, seconds included
TIME_FORMAT = "%H:%M:%S"


def format_time(time_zone: str, now: Optional[datetime] = None) -> str:
    tz = pytz.timezone(time_zone)
    if now is None:
        current = datetime.now(tz)
    elif now.tzinfo is None:
        current = pytz.utc.localize(now).astimezone(tz)
    else:
        current = now.astimezone(tz)
    return current.strftime(TIME_FORMAT)


class TimeDisplay:
    """
    Wall clock for one time zone that calls `on_tick` with the formatted time
    once per `interval` seconds while mounted.

    mount() emits immediately and starts a background scheduler; unmount()
    removes the job and shuts the scheduler down, so no tick is delivered
    after it returns.
    """

    def __init__(
        self,
        time_zone: str,
        interval: float = 1.0,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        pytz.timezone(time_zone)  # raises UnknownTimeZoneError early
        self.time_zone = time_zone
        self.interval = interval
        self._clock = clock
        self._scheduler: Optional[BackgroundScheduler] = None
        self._on_tick: Optional[Callable[[str], None]] = None
        self._lock = threading.RLock()

    @property
    def mounted(self) -> bool:
        return self._scheduler is not None

    def current(self) -> str:
        now = self._clock() if self._clock else None
        return format_time(self.time_zone, now)

    def _tick(self) -> None:
        with self._lock:
            callback = self._on_tick if self._scheduler is not None else None
            if callback is not None:
                callback(self.current())

    def mount(self, on_tick: Callable[[str], None]) -> "TimeDisplay":
        if self.mounted:
            self.unmount()
        self._on_tick = on_tick
        on_tick(self.current())
        scheduler = BackgroundScheduler(timezone=pytz.timezone(self.time_zone))
        scheduler.add_job(
            self._tick,
            "interval",
            seconds=self.interval,
            id="time-display",
            max_instances=1,
            coalesce=True,
        )
        scheduler.start()
        self._scheduler = scheduler
        return self

    def unmount(self) -> None:
        with self._lock:
            scheduler, self._scheduler = self._scheduler, None
            self._on_tick = None
        if scheduler is not None:
            scheduler.remove_all_jobs()
            scheduler.shutdown(wait=False)

    def set_time_zone(self, time_zone: str) -> None:
        pytz.timezone(time_zone)
        callback = self._on_tick
        was_mounted = self.mounted
        if was_mounted:
            self.unmount()
        self.time_zone = time_zone
        if was_mounted and callback is not None:
            self.mount(callback)

    def __enter__(self) -> "TimeDisplay":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unmount()


def clock_events(display: TimeDisplay, timeout: Optional[float] = None) -> Iterator[str]:
    """
    Server-sent event stream of clock values. The display stays mounted for
    as long as the generator is alive; closing it (client disconnect)
    unmounts the display.
    """
    ticks: "queue.Queue[str]" = queue.Queue()
    display.mount(ticks.put)
    try:
        while True:
            try:
                value = ticks.get(timeout=timeout)
            except queue.Empty:
                # keep-alive comment so proxies hold the connection open
                yield ": keep-alive\n\n"
                continue
            yield f"data: {value}\n\n"
    finally:
        display.unmount()
