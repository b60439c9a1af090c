"""The dining table: forks, philosophers and the monitor that watches them."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional, TextIO

from philo.parsing import Settings
from philo.timing import current_time_ms, precise_sleep

__all__ = ["Philosopher", "Table"]

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"
DIED = "died"


@dataclass(eq=False)
class Philosopher:
    """One seat at the table and the two forks within its reach.

    ``last_meal`` is measured in milliseconds from the start of the run.
    A lone philosopher has no right fork.
    """

    id: int
    left_fork: threading.Lock
    right_fork: Optional[threading.Lock]
    meals_eaten: int = 0
    last_meal: int = 0


class Table:
    """Shared state of one simulation and the routines that act on it."""

    def __init__(self, settings: Settings, output: TextIO) -> None:
        self.settings = settings
        self.output = output
        self.min_meals = -1 if settings.min_meals is None else settings.min_meals
        self.start_time = current_time_ms()
        self._dead = False
        self._dead_lock = threading.Lock()
        self._meal_lock = threading.Lock()
        self._write_lock = threading.Lock()
        count = settings.num_philos
        forks = [threading.Lock() for _ in range(count)]
        self.philos = [
            Philosopher(
                id=seat + 1,
                left_fork=fork,
                right_fork=None if count == 1 else forks[(seat + 1) % count],
            )
            for seat, fork in enumerate(forks)
        ]

    def _elapsed(self) -> int:
        return current_time_ms() - self.start_time

    def _set_dead(self) -> None:
        with self._dead_lock:
            self._dead = True
        # Wait for any message being written to finish before returning.
        with self._write_lock:
            pass

    def stopped(self) -> bool:
        """Return True once the simulation has been told to stop."""
        with self._dead_lock:
            return self._dead

    def print_action(self, philo: Philosopher, action: str) -> bool:
        """Log ``action`` for ``philo``; return True if stopped and nothing was written."""
        with self._write_lock:
            if self.stopped():
                return True
            self.output.write(f"{self._elapsed()} {philo.id} {action}\n")
            self.output.flush()
            return False

    @staticmethod
    def _release_forks(philo: Philosopher) -> None:
        if philo.right_fork is not None:
            philo.right_fork.release()
        philo.left_fork.release()

    def _single_philo(self, philo: Philosopher) -> None:
        if self.print_action(philo, TAKEN_FORK):
            return
        with philo.left_fork:
            while not self.stopped():
                precise_sleep(10)

    def take_forks(self, philo: Philosopher) -> bool:
        """Pick up both forks; return True if the philosopher now holds them.

        Even seats reach left first, odd seats right first. A lone
        philosopher holds its one fork until the simulation stops and
        then returns False, as does anyone interrupted by a stop.
        """
        if philo.right_fork is None:
            self._single_philo(philo)
            return False
        if philo.id % 2 == 0:
            first, second = philo.left_fork, philo.right_fork
        else:
            first, second = philo.right_fork, philo.left_fork
        first.acquire()
        self.print_action(philo, TAKEN_FORK)
        if self.stopped():
            first.release()
            return False
        second.acquire()
        self.print_action(philo, TAKEN_FORK)
        if self.stopped():
            first.release()
            second.release()
            return False
        return True

    def eat(self, philo: Philosopher) -> None:
        """Record a meal, eat for ``time_to_eat`` and put both forks down."""
        with self._meal_lock:
            philo.meals_eaten += 1
            philo.last_meal = self._elapsed()
        try:
            if not self.print_action(philo, EATING):
                precise_sleep(self.settings.time_to_eat)
        finally:
            self._release_forks(philo)

    def sleep(self, philo: Philosopher) -> None:
        """Announce sleeping and sleep for ``time_to_sleep``."""
        self.print_action(philo, SLEEPING)
        precise_sleep(self.settings.time_to_sleep)

    def think(self, philo: Philosopher) -> None:
        """Announce thinking and pause briefly."""
        if self.print_action(philo, THINKING):
            return
        precise_sleep(1)

    def philo_routine(self, philo: Philosopher) -> None:
        """Run one philosopher's eat, sleep, think cycle until the stop."""
        if philo.id % 2 == 1:
            self.think(philo)
            precise_sleep(self.settings.time_to_eat // 2)
        while not self.stopped():
            if not self.take_forks(philo):
                break
            if self.stopped():
                self._release_forks(philo)
                break
            self.eat(philo)
            if self.stopped():
                break
            self.sleep(philo)
            if self.stopped():
                break
            self.think(philo)

    def check_for_dead(self) -> bool:
        """Report and stop on the first philosopher that starved; True if one did."""
        for philo in self.philos:
            now = self._elapsed()
            with self._meal_lock:
                last_meal = philo.last_meal
            if now > last_meal + self.settings.time_to_die:
                self.print_action(philo, DIED)
                self._set_dead()
                return True
        return False

    def check_if_ate(self) -> None:
        """Stop the simulation once every philosopher has eaten enough."""
        for philo in self.philos:
            with self._meal_lock:
                meals = philo.meals_eaten
            if meals < self.min_meals:
                return
        self._set_dead()

    def monitor_step(self) -> bool:
        """Run one monitor pass; return False when the simulation is over."""
        if self.check_for_dead():
            return False
        if self.min_meals > 0:
            self.check_if_ate()
        precise_sleep(1)
        return not self.stopped()

    def run(self) -> None:
        """Start every philosopher, monitor them to the end and join them.

        Raises RuntimeError if a thread cannot be started.
        """
        self.start_time = current_time_ms()
        threads = []
        try:
            for philo in self.philos:
                thread = threading.Thread(
                    target=self.philo_routine,
                    args=(philo,),
                    name=f"philo-{philo.id}",
                )
                thread.start()
                threads.append(thread)
        except RuntimeError as exc:
            self._set_dead()
            for thread in threads:
                thread.join()
            raise RuntimeError("Error: could not create threads!") from exc
        while self.monitor_step():
            pass
        for thread in threads:
            thread.join()