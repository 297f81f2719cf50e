"""The rescue mission simulation itself."""

from __future__ import annotations

import os
import random
import sys
import time
from collections.abc import Callable
from pathlib import Path

from rescuesim.agents import Commando, Guard, Hostage
from rescuesim.items import Flashbang, Silencer, SmokeGrenade
from rescuesim.logger import write_csv

GUARD_COUNT = 6
HOSTAGE_COUNT = 2
EFFECT_DURATION = 2
CSV_NAME = "mission_log.csv"


class Mission:
    """A single attempt to sneak past the guards and free the hostages."""

    def __init__(
        self,
        rng: random.Random | None = None,
        sleep: Callable[[float], None] | None = None,
        log_dir: str | os.PathLike[str] = "logs",
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._sleep = sleep if sleep is not None else time.sleep
        self.log_dir = Path(log_dir)

        self.guards = [
            Guard(self._rng.uniform(0.10, 0.19), self._rng) for _ in range(GUARD_COUNT)
        ]
        self.hostages = [Hostage() for _ in range(HOSTAGE_COUNT)]
        self.commando = Commando()
        for item in (SmokeGrenade(), Flashbang(), Silencer()):
            self.commando.add_item(item)

        self.log_entries: list[str] = []
        self.success = False
        self.killed_guards = 0
        self.has_silencer = False
        self.flashbang_effect = 0
        self.smoke_effect = 0
        self._start = 0.0
        self._end = 0.0

    @property
    def elapsed_ms(self) -> int:
        """Duration of the last run in whole milliseconds."""
        return int((self._end - self._start) * 1000)

    @property
    def unused_items(self) -> int:
        """Number of items the commando has not used."""
        return sum(1 for item in self.commando.items if not item.used)

    @property
    def csv_path(self) -> Path:
        """Where the results of a run are appended."""
        return self.log_dir / CSV_NAME

    def run(self) -> None:
        """Play the mission out, time it and append its results to the CSV log."""
        self._start = time.perf_counter()
        self._simulate()
        self._end = time.perf_counter()
        self._log_to_csv()

    def log(self, message: str) -> None:
        """Add an entry to the mission log."""
        self.log_entries.append(message)

    def pause(self, milliseconds: int) -> None:
        """Let the given number of milliseconds pass."""
        self._sleep(milliseconds / 1000)

    def apply_flashbang_effect(self) -> None:
        """Stun the guards for the next encounters."""
        self.flashbang_effect = EFFECT_DURATION

    def apply_smoke_effect(self) -> None:
        """Blind the guards for the next encounters."""
        self.smoke_effect = EFFECT_DURATION

    def _simulate(self) -> None:
        self.log_entries.clear()
        self.log("Tworzenie misji...")
        self.pause(500)
        self.log("Misja rozpoczęta.")
        self.pause(500)
        self.log("Komandos skrada się.")
        self.pause(self._rng.randrange(500, 1500))

        if self._encounter_guards():
            self.pause(1000)
            self.log("Komandos został zauważony. Misja zakończona niepowodzeniem.")
            self.success = False
        else:
            self._rescue_hostages()
            self.success = True

    def _encounter_guards(self) -> bool:
        """Meet every living guard in random order; return True if spotted."""
        order = list(range(len(self.guards)))
        self._rng.shuffle(order)

        for idx in order:
            guard = self.guards[idx]
            if not guard.alive:
                continue
            number = idx + 1

            modifier = 1.0
            if self.flashbang_effect > 0:
                modifier *= 0.5
            if self.smoke_effect > 0:
                modifier *= 0.7

            if guard.detect_commando(modifier):
                self._log_alarm(number)
                return True

            if self.flashbang_effect > 0:
                self.flashbang_effect -= 1
            if self.smoke_effect > 0:
                self.smoke_effect -= 1

            if guard.detect_commando():
                self._log_alarm(number)
                return True

            threshold = 80 if self.has_silencer else 50
            if self._rng.randrange(100) < threshold:
                guard.kill()
                self.log(f"Komandos eliminuje strażnika nr {number}.")
                self.killed_guards += 1
                self.pause(self._rng.randint(500, 1500))
                self.log("Komandos znów się skrada.")

            self._try_item()
        return False

    def _try_item(self) -> None:
        # At most one item per encounter, each unused one with a 50% chance.
        for item in self.commando.items:
            if item.used:
                continue
            if self._rng.randrange(2):
                item.use()
                self.log(f"Komandos używa narzędzia: {item.name}")
                item.apply_effect(self)
                return

    def _log_alarm(self, number: int) -> None:
        self.log(f"[Strażnik nr {number}] wykrył komandosa! Alarm! Misja zakończona.")

    def _rescue_hostages(self) -> None:
        for hostage in self.hostages:
            hostage.rescue()
        self.pause(self._rng.randrange(1000, 3000))
        self.log("Zakładnicy uratowani.")
        self.log("Komandos niezauważony. Misja zakończona sukcesem.")

    def summary(self) -> str:
        """Human-readable report of the last run, ending with the full log."""
        total_ms = self.elapsed_ms
        minutes = total_ms // 60000
        seconds = (total_ms % 60000) // 1000
        hundredths = (total_ms % 1000) // 10
        lines = [
            f"Czas misji: {minutes:02d}:{seconds:02d}:{hundredths:02d}",
            f"Status misji: {'SUKCES' if self.success else 'NIEPOWODZENIE'}",
            f"Zabici strażnicy: {self.killed_guards}",
            f"Żywi strażnicy: {len(self.guards) - self.killed_guards}",
            f"Nie użyte przedmioty: {self.unused_items}",
            "",
            "=== LOG MISJI ===",
            *self.log_entries,
        ]
        return "\n".join(lines) + "\n"

    def csv_row(self) -> str:
        """One CSV line describing the last run."""
        seconds = self.elapsed_ms // 1000
        head = ",".join(
            [
                f"{seconds}s",
                "Success" if self.success else "Fail",
                str(self.killed_guards),
                str(len(self.guards) - self.killed_guards),
                str(self.unused_items),
            ]
        )
        return head + "," + "".join(entry + "   " for entry in self.log_entries)

    def _log_to_csv(self) -> None:
        os.makedirs(self.log_dir, exist_ok=True)
        try:
            write_csv(self.csv_path, self.csv_row())
        except (OSError, ValueError) as exc:
            print(f"failed to write mission log {self.csv_path}: {exc}", file=sys.stderr)