import random
import re

import pytest

from rescuesim.items import Flashbang, Silencer, SmokeGrenade
from rescuesim.mission import Mission


class _Clock:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def clock():
    return _Clock()


@pytest.fixture
def mission(tmp_path, clock):
    return Mission(rng=random.Random(7), sleep=clock, log_dir=tmp_path / "logs")


def test_constructor_initializes_correctly(mission):
    assert len(mission.guards) == 6
    assert len(mission.hostages) == 2
    assert len(mission.commando.items) == 3
    assert [type(i) for i in mission.commando.items] == [SmokeGrenade, Flashbang, Silencer]


def test_guard_detection_chances_in_range(mission):
    assert all(0.10 <= g.detection_chance <= 0.19 for g in mission.guards)
    assert all(g.alive for g in mission.guards)


def test_log_adds_entry(mission):
    mission.log("Test entry")
    assert mission.log_entries[-1] == "Test entry"


def test_apply_effects(mission):
    mission.apply_flashbang_effect()
    assert mission.flashbang_effect == 2
    mission.apply_smoke_effect()
    assert mission.smoke_effect == 2


def test_pause_uses_sleep_in_seconds(mission, clock):
    result = mission.pause(1600)
    assert result is None
    assert clock.calls == [1.6]
    assert mission.log_entries == []
    assert mission.flashbang_effect == 0
    assert mission.smoke_effect == 0


def test_flashbang_through_mission(mission, clock):
    Flashbang().apply_effect(mission)
    assert mission.log_entries == ["Granat hukowy oglusza straznikow."]
    assert mission.flashbang_effect == 2
    assert clock.calls == [1.6]


def test_silencer_sets_flag(mission):
    Silencer().apply_effect(mission)
    assert mission.has_silencer is True


def test_run_sets_times_and_logs(mission):
    mission.run()
    assert mission.elapsed_ms >= 0
    assert mission.log_entries[:3] == [
        "Tworzenie misji...",
        "Misja rozpoczęta.",
        "Komandos skrada się.",
    ]


def test_all_guards_dead_means_success(mission):
    for guard in mission.guards:
        guard.kill()
    mission.run()
    assert mission.success is True
    assert all(h.rescued for h in mission.hostages)
    assert "Zakładnicy uratowani." in mission.log_entries
    assert mission.log_entries[-1] == "Komandos niezauważony. Misja zakończona sukcesem."


def test_csv_row_for_trivial_success(mission):
    for guard in mission.guards:
        guard.kill()
    mission.run()
    expected_log = "".join(entry + "   " for entry in mission.log_entries)
    assert mission.csv_row() == "0s,Success,0,6,3," + expected_log


def test_log_to_csv_creates_file(mission):
    mission.run()
    assert mission.csv_path.exists()
    lines = mission.csv_path.read_text(encoding="utf-8").splitlines()
    assert lines == [mission.csv_row()]


def test_runs_append_to_csv(tmp_path, clock):
    log_dir = tmp_path / "logs"
    for seed in (1, 2):
        Mission(rng=random.Random(seed), sleep=clock, log_dir=log_dir).run()
    assert len((log_dir / "mission_log.csv").read_text(encoding="utf-8").splitlines()) == 2


def test_alert_guards_fail_mission(mission):
    for guard in mission.guards:
        guard.detection_chance = 1.0
    mission.run()
    assert mission.success is False
    assert re.fullmatch(
        r"\[Strażnik nr [1-6]\] wykrył komandosa! Alarm! Misja zakończona\.",
        mission.log_entries[-2],
    )
    assert mission.log_entries[-1] == (
        "Komandos został zauważony. Misja zakończona niepowodzeniem."
    )
    assert not any(h.rescued for h in mission.hostages)
    assert mission.csv_row().startswith("0s,Fail,0,6,3,")


def test_summary_format(mission):
    mission.run()
    text = mission.summary()
    lines = text.splitlines()
    assert re.fullmatch(r"Czas misji: \d{2}:\d{2}:\d{2}", lines[0])
    assert lines[1] in ("Status misji: SUKCES", "Status misji: NIEPOWODZENIE")
    assert lines[2] == f"Zabici strażnicy: {mission.killed_guards}"
    assert lines[3] == f"Żywi strażnicy: {6 - mission.killed_guards}"
    assert lines[4] == f"Nie użyte przedmioty: {mission.unused_items}"
    assert lines[5:7] == ["", "=== LOG MISJI ==="]
    assert lines[7:] == mission.log_entries


def test_killed_and_used_counts_consistent(mission):
    mission.run()
    assert mission.killed_guards == sum(1 for g in mission.guards if not g.alive)
    used = [i for i in mission.commando.items if i.used]
    assert mission.unused_items == 3 - len(used)
    for item in used:
        assert f"Komandos używa narzędzia: {item.name}" in mission.log_entries


def test_same_seed_same_outcome(tmp_path, clock):
    first = Mission(rng=random.Random(42), sleep=clock, log_dir=tmp_path / "a")
    second = Mission(rng=random.Random(42), sleep=clock, log_dir=tmp_path / "b")
    first.run()
    second.run()
    assert first.log_entries == second.log_entries
    assert first.success == second.success


def test_run_clears_previous_entries(mission):
    mission.log("stale")
    mission.run()
    assert "stale" not in mission.log_entries


def test_unwritable_log_dir_raises(tmp_path, clock):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    mission = Mission(rng=random.Random(3), sleep=clock, log_dir=blocker)
    with pytest.raises(OSError):
        mission.run()