"""The dining table: philosophers, forks and the monitor."""

from __future__ import annotations

import sys
import threading
from enum import Enum

from dining.clock import now_ms, sleep_ms
from dining.settings import Settings

RESET = "\033[0m"


class Status(Enum):
    """A state change that is reported, with its text and colour."""

    TAKEN_FORK = ("has taken a fork", "\033[0;33m")
    EATING = ("is eating", "\033[0;32m")
    SLEEPING = ("is sleeping", "\033[0;34m")
    THINKING = ("is thinking", "\033[0;36m")
    DIED = ("died", "\033[0;31m")

    @property
    def text(self) -> str:
        return self.value[0]

    @property
    def color(self) -> str:
        return self.value[1]


class Philosopher:
    """One diner, numbered from 1, sitting at a table."""

    def __init__(self, ident: int, table: Table):
        self.id = ident
        self.table = table
        self.eat_count = 0
        self.last_meal = now_ms()
        self.meal_lock = threading.Lock()

    def fork_order(self) -> tuple[int, int]:
        """Return the indices of the forks in the order they are taken."""
        left = self.id - 1
        right = self.id % self.table.settings.philosophers
        if self.id % 2 == 0:
            return right, left
        return left, right

    def _record_meal(self) -> None:
        settings = self.table.settings
        with self.meal_lock:
            self.last_meal = now_ms()
            self.eat_count += 1
        sleep_ms(settings.time_to_eat)
        if settings.max_meals is not None and self.eat_count == settings.max_meals:
            self.table.mark_finished()

    def eat(self) -> None:
        """Take both forks, eat, and put them back."""
        table = self.table
        first, second = (table.forks[i] for i in self.fork_order())
        with first:
            table.print_status(self, Status.TAKEN_FORK)
            if table.settings.philosophers == 1:
                sleep_ms(table.settings.time_to_die)
                return
            with second:
                table.print_status(self, Status.TAKEN_FORK)
                table.print_status(self, Status.EATING)
                self._record_meal()

    def routine(self) -> None:
        """Eat, sleep and think until the simulation ends."""
        table = self.table
        while not table.is_finished():
            self.eat()
            if table.settings.philosophers == 1:
                break
            table.print_status(self, Status.SLEEPING)
            sleep_ms(table.settings.time_to_sleep)
            table.print_status(self, Status.THINKING)

    def starved(self) -> bool:
        """Whether the time since the last meal has reached the limit."""
        with self.meal_lock:
            elapsed = now_ms() - self.last_meal
        return elapsed >= self.table.settings.time_to_die


class Table:
    """Shared state of one simulation run."""

    def __init__(self, settings: Settings, out=None):
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.dead = False
        self.finished_philosophers = 0
        self.start_time = now_ms()
        self.forks = [threading.Lock() for _ in range(settings.philosophers)]
        self.philosophers = [
            Philosopher(number, self) for number in range(1, settings.philosophers + 1)
        ]
        self._print_lock = threading.Lock()
        self._dead_lock = threading.Lock()
        self._finished_lock = threading.Lock()

    def is_finished(self) -> bool:
        """Whether the simulation has been stopped."""
        with self._dead_lock:
            return self.dead

    def mark_finished(self) -> None:
        """Count one more philosopher that has eaten enough."""
        with self._finished_lock:
            self.finished_philosophers += 1

    def _write(self, philosopher: Philosopher, status: Status) -> None:
        with self._print_lock:
            stamp = now_ms() - self.start_time
            self.out.write(f"{status.color}{stamp} {philosopher.id} {status.text}{RESET}\n")
            self.out.flush()

    def print_status(self, philosopher: Philosopher, status: Status) -> None:
        """Report a status change unless the simulation has stopped."""
        with self._dead_lock:
            if not self.dead:
                self._write(philosopher, status)

    def _announce_death(self, philosopher: Philosopher) -> None:
        with self._dead_lock:
            if not self.dead:
                self._write(philosopher, Status.DIED)
            self.dead = True

    def _all_ate(self) -> bool:
        if self.settings.max_meals is None:
            return False
        with self._finished_lock:
            done = self.finished_philosophers >= self.settings.philosophers
        if done:
            with self._dead_lock:
                self.dead = True
        return done

    def monitor(self) -> Philosopher | None:
        """Watch the table until someone starves or everyone has eaten.

        Returns the philosopher who died, or ``None`` if all ate enough.
        """
        while True:
            for philosopher in self.philosophers:
                if philosopher.starved():
                    self._announce_death(philosopher)
                    return philosopher
            if self._all_ate():
                return None
            sleep_ms(1)

    def run(self) -> Philosopher | None:
        """Run the simulation to its end and return the monitor's verdict."""
        self.start_time = now_ms()
        threads = []
        for philosopher in self.philosophers:
            with philosopher.meal_lock:
                philosopher.last_meal = self.start_time
            thread = threading.Thread(
                target=philosopher.routine,
                name=f"philosopher-{philosopher.id}",
                daemon=True,
            )
            thread.start()
            threads.append(thread)
            sleep_ms(1)
        verdict = self.monitor()
        for thread in threads:
            thread.join()
        return verdict