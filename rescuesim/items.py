"""Equipment the commando can use during a mission."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol


class _EffectTarget(Protocol):
    has_silencer: bool

    def log(self, message: str) -> None: ...

    def pause(self, milliseconds: int) -> None: ...

    def apply_flashbang_effect(self) -> None: ...

    def apply_smoke_effect(self) -> None: ...


class Item(ABC):
    """A single-use piece of equipment."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.used = False

    def use(self) -> None:
        """Mark the item as spent."""
        self.used = True

    @abstractmethod
    def apply_effect(self, mission: _EffectTarget) -> None:
        """Apply the item's effect to the mission."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, used={self.used})"


class Flashbang(Item):
    """Stuns guards, halving their detection chance for a while."""

    def __init__(self) -> None:
        super().__init__("Granat hukowy")

    def apply_effect(self, mission: _EffectTarget) -> None:
        mission.log("Granat hukowy oglusza straznikow.")
        mission.apply_flashbang_effect()
        mission.pause(1600)


class SmokeGrenade(Item):
    """Blinds nearby guards, lowering their detection chance for a while."""

    def __init__(self) -> None:
        super().__init__("Granat dymny")

    def apply_effect(self, mission: _EffectTarget) -> None:
        mission.log("Granat dymny oslepia straznikow w poblizu.")
        mission.apply_smoke_effect()
        mission.pause(1200)


class Silencer(Item):
    """Makes eliminating guards more likely to succeed."""

    def __init__(self) -> None:
        super().__init__("Tłumik")

    def apply_effect(self, mission: _EffectTarget) -> None:
        mission.has_silencer = True