"""The dining philosophers, with threads and with asyncio tasks."""

from __future__ import annotations

import argparse
import asyncio
import queue
import sys
import threading
from typing import Any, Iterable

PHILOSOPHERS = ("Socrates", "Hypatia", "Plato", "Aristotle", "Pythagoras")
"""Names of the philosophers seated at the table."""

CHANNEL_CAPACITY = 10
"""How many thoughts may wait to be read before thinkers block."""

_DONE = object()


def _check_names(names: list[str]) -> None:
    if len(names) < 2:
        raise ValueError("at least two philosophers are needed to share forks")


class Philosopher:
    """A philosopher who eats with two shared forks and sends out thoughts."""

    def __init__(
        self,
        name: str,
        left_fork: threading.Lock,
        right_fork: threading.Lock,
        thoughts: queue.Queue,
        eat_time: float = 0.01,
    ) -> None:
        self.name = name
        self.left_fork = left_fork
        self.right_fork = right_fork
        self.thoughts = thoughts
        self.eat_time = eat_time

    def think(self) -> None:
        """Send a new idea to the thoughts channel."""
        self.thoughts.put(f"Eureka! {self.name} has a new idea!")

    def eat(self) -> None:
        """Pick up both forks, eat for a while, then put them down."""
        print(f"{self.name} is trying to eat")
        with self.left_fork, self.right_fork:
            print(f"{self.name} is eating...")
            threading.Event().wait(self.eat_time)


def _live(philosopher: Philosopher, rounds: int, thoughts: queue.Queue) -> None:
    try:
        for _ in range(rounds):
            philosopher.eat()
            philosopher.think()
    finally:
        thoughts.put(_DONE)


def dine(
    names: Iterable[str] = PHILOSOPHERS, rounds: int = 100, eat_time: float = 0.01
) -> list[str]:
    """Let the philosophers eat and think on threads; return their thoughts."""
    names = list(names)
    _check_names(names)
    thoughts: queue.Queue[Any] = queue.Queue(maxsize=CHANNEL_CAPACITY)
    forks = [threading.Lock() for _ in names]

    threads = []
    for i, name in enumerate(names):
        left_fork, right_fork = forks[i], forks[(i + 1) % len(forks)]
        # Break the symmetry so that the philosophers cannot deadlock.
        if i == len(forks) - 1:
            left_fork, right_fork = right_fork, left_fork
        philosopher = Philosopher(name, left_fork, right_fork, thoughts, eat_time)
        threads.append(
            threading.Thread(
                target=_live, args=(philosopher, rounds, thoughts), daemon=True
            )
        )
    for thread in threads:
        thread.start()

    received: list[str] = []
    finished = 0
    while finished < len(threads):
        item = thoughts.get()
        if item is _DONE:
            finished += 1
        else:
            received.append(item)
    for thread in threads:
        thread.join()
    return received


class AsyncPhilosopher:
    """A philosopher whose meals and thoughts are asyncio tasks."""

    FORK_DELAY = 0.001
    """Pause between picking up the first and second fork."""

    def __init__(
        self,
        name: str,
        left_fork: asyncio.Lock,
        right_fork: asyncio.Lock,
        thoughts: asyncio.Queue,
        eat_time: float = 0.005,
    ) -> None:
        self.name = name
        self.left_fork = left_fork
        self.right_fork = right_fork
        self.thoughts = thoughts
        self.eat_time = eat_time

    async def think(self) -> None:
        """Send a new idea to the thoughts channel."""
        await self.thoughts.put(f"Eureka! {self.name} has a new idea!")

    async def eat(self) -> None:
        """Pick up both forks, eat for a while, then put them down."""
        async with self.left_fork:
            # Let another task run before reaching for the second fork.
            await asyncio.sleep(self.FORK_DELAY)
            async with self.right_fork:
                print(f"{self.name} is eating...")
                await asyncio.sleep(self.eat_time)


async def _live_async(philosopher: AsyncPhilosopher, rounds: int) -> None:
    for _ in range(rounds):
        await philosopher.think()
        await philosopher.eat()


async def dine_async(
    names: Iterable[str] = PHILOSOPHERS, rounds: int = 100, eat_time: float = 0.005
) -> list[str]:
    """Let the philosophers eat and think as tasks; return their thoughts."""
    names = list(names)
    _check_names(names)
    thoughts: asyncio.Queue[Any] = asyncio.Queue(maxsize=CHANNEL_CAPACITY)
    forks = [asyncio.Lock() for _ in names]

    tasks = []
    for i, name in enumerate(names):
        left_fork, right_fork = forks[i], forks[(i + 1) % len(forks)]
        # Break the symmetry so that the philosophers cannot deadlock.
        if i == 0:
            left_fork, right_fork = right_fork, left_fork
        philosopher = AsyncPhilosopher(name, left_fork, right_fork, thoughts, eat_time)
        tasks.append(asyncio.create_task(_live_async(philosopher, rounds)))

    async def close_when_done() -> None:
        try:
            await asyncio.gather(*tasks)
        finally:
            await thoughts.put(_DONE)

    closer = asyncio.create_task(close_when_done())
    received: list[str] = []
    while (item := await thoughts.get()) is not _DONE:
        received.append(item)
    await closer
    return received


def main(argv: list[str] | None = None) -> int:
    """Seat the philosophers and print their thoughts."""
    parser = argparse.ArgumentParser(description="Dining philosophers.")
    parser.add_argument(
        "--async", dest="use_async", action="store_true", help="use asyncio tasks"
    )
    parser.add_argument("--rounds", type=int, default=100)
    args = parser.parse_args(argv)

    if args.use_async:
        for thought in asyncio.run(dine_async(rounds=args.rounds)):
            print(f"Here is a thought: {thought}")
    else:
        for thought in dine(rounds=args.rounds):
            print(thought)
    return 0


if __name__ == "__main__":
    sys.exit(main())