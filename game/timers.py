"""
Ecclesia - Timers Module

Delayed callbacks with explicit cancellation handles. The progression
engine keeps every handle it schedules and cancels them whenever it leaves
the phase that scheduled them.

The server runs under gevent, so the default scheduler spawns greenlets.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Callable

import gevent

logger = logging.getLogger(__name__)


class TimerHandle(ABC):
    """A scheduled callback that can be cancelled before it fires"""

    @abstractmethod
    def cancel(self):
        """Prevent the callback from running (no-op if already run)"""
        pass

    @property
    @abstractmethod
    def active(self) -> bool:
        """True until the callback has run or been cancelled"""
        pass


class Scheduler(ABC):
    """Source of delayed callbacks"""

    @abstractmethod
    def schedule(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Run callback after delay seconds"""
        pass

    @abstractmethod
    def now(self) -> float:
        """Monotonic seconds, same clock the delays are measured on"""
        pass


class GreenletTimer(TimerHandle):
    def __init__(self, greenlet: gevent.Greenlet):
        self._greenlet = greenlet

    def cancel(self):
        # A callback cancelling its own timer is already running; let it finish
        if self._greenlet.dead or self._greenlet is gevent.getcurrent():
            return
        self._greenlet.kill(block=False)

    @property
    def active(self) -> bool:
        return not self._greenlet.dead


class GeventScheduler(Scheduler):
    """Schedules callbacks as greenlets on the gevent hub"""

    def schedule(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        logger.debug(f"Scheduling {getattr(callback, '__name__', callback)} in {delay:.2f}s")
        return GreenletTimer(gevent.spawn_later(max(0.0, delay), callback))

    def now(self) -> float:
        return time.monotonic()
