"""Characters taking part in a rescue mission."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rescuesim.items import Item


class Agent:
    """A living participant of the mission that can be killed and can speak."""

    role = "Agent"

    def __init__(self, alive: bool = True) -> None:
        self.alive = alive

    def kill(self) -> None:
        """Mark the agent as dead."""
        self.alive = False

    def _say(self, text: str) -> str:
        line = f"[{self.role}] {text}\n"
        sys.stdout.write(line)
        return line

    def speak(self) -> str:
        """Print the agent's catchphrase and return the printed line."""
        return self._say("Czysto!")


class Commando(Agent):
    """The infiltrating soldier, carrying an inventory of items."""

    role = "Commando"

    def __init__(self, alive: bool = True) -> None:
        super().__init__(alive)
        self.items: list[Item] = []

    def add_item(self, item: Item) -> None:
        """Put an item at the end of the inventory."""
        self.items.append(item)

    def speak(self) -> str:
        """Print the commando's battle cry and return the printed line."""
        return self._say("Do boju!")


class Guard(Agent):
    """An enemy guard with a fixed base chance of spotting the commando."""

    role = "Guard"

    def __init__(self, detection_chance: float, rng: random.Random | None = None) -> None:
        if not 0.0 <= detection_chance <= 1.0:
            raise ValueError(
                f"detection chance must be within [0, 1], got {detection_chance}"
            )
        super().__init__(True)
        self.detection_chance = detection_chance
        self._rng = rng if rng is not None else random.Random()

    def detect_commando(self, modifier: float = 1.0) -> bool:
        """Roll whether this guard spots the commando.

        The base chance is scaled by ``modifier`` and clamped to [0, 1].
        A dead guard never detects anything.
        """
        roll = self._rng.random()
        effective = min(1.0, max(0.0, self.detection_chance * modifier))
        return self.alive and roll < effective

    def speak(self) -> str:
        """Print the guard's challenge and return the printed line."""
        return self._say("Kto tam?!")


@dataclass
class Hostage:
    """A captive waiting to be rescued."""

    rescued: bool = False

    def rescue(self) -> None:
        """Mark the hostage as rescued."""
        self.rescued = True