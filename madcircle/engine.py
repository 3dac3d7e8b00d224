"""Engine - cooperative fixed-step tick loop driving the session's systems."""

import os
import random

from madcircle.clock import Clock
from madcircle.types import System


class Engine:
    def __init__(self, tps: int = 60, seed: int | None = None) -> None:
        self._clock = Clock(tps)
        self._systems: list[System] = []
        self._stop_requested: bool = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        """Seeded RNG; renderers draw palette choices from it."""
        return self._rng

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def step(self) -> None:
        """Advance one tick, calling every system in registration order."""
        self._stop_requested = False
        self._clock.advance()
        ctx = self._clock.context(self._request_stop, self._rng)
        for system in self._systems:
            system(ctx)
            if self._stop_requested:
                break

    def run(self, n: int) -> int:
        """Step up to ``n`` ticks; a system may end the run early. Returns ticks taken."""
        for taken in range(1, n + 1):
            self.step()
            if self._stop_requested:
                return taken
        return n
