import json

import numpy as np
import pytest

from pivotsort import bench
from pivotsort.errors import BenchmarkError


def test_make_input_shapes():
    rng = np.random.default_rng(0)

    data = bench.make_input("random", 200, rng)
    assert len(data) == 200
    assert all(isinstance(x, int) and 0 <= x < 200 for x in data)

    assert bench.make_input("ascending", 5, rng) == [0, 1, 2, 3, 4]
    assert bench.make_input("descending", 5, rng) == [4, 3, 2, 1, 0]
    assert bench.make_input("descending", 0, rng) == []


def test_make_input_unknown_scenario():
    with pytest.raises(ValueError):
        bench.make_input("sawtooth", 10, np.random.default_rng())


def test_random_input_is_reproducible():
    a = bench.make_input("random", 50, np.random.default_rng(3))
    b = bench.make_input("random", 50, np.random.default_rng(3))
    assert a == b


@pytest.mark.parametrize("scenario", bench.SCENARIOS)
def test_time_trials(scenario):
    res = bench.time_trials(scenario, 300, 4, seed=1)

    assert res.scenario == scenario
    assert res.elements == 300
    assert res.runs == 4
    assert 0 <= res.best <= res.mean <= res.worst


def test_time_trials_with_copy_sorter():
    res = bench.time_trials("random", 100, 2, sorter=bench.sort_copy, seed=2)
    assert res.runs == 2


def test_time_trials_rejects_broken_sorter():
    def reverse_sort(data):
        data.sort(reverse=True)

    with pytest.raises(BenchmarkError):
        bench.time_trials("random", 50, 1, sorter=reverse_sort, seed=0)


def test_format_table():
    table = bench.format_table([bench.TrialResult("random", 1000, 100, 0.0012, 0.001, 0.002)])
    lines = table.splitlines()

    assert len(lines) == 5
    assert "random" in lines[3]
    assert "1.200 ms" in lines[3]
    assert len({len(line) for line in lines}) == 1


def test_main_prints_table(capsys, tmp_path, monkeypatch):
    monkeypatch.setattr(bench.settings, "SETTINGS_JSON", str(tmp_path / "missing.json"))
    assert bench.main(["--elements", "50", "--runs", "2", "--seed", "5", "--scenario", "descending"]) == 0

    out = capsys.readouterr().out
    assert "descending" in out
    assert "random" not in out


def test_main_reads_settings(tmp_path, capsys):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"bench_elements": 25, "bench_runs": 1}))

    assert bench.main(["--settings", str(path), "--copy"]) == 0

    out = capsys.readouterr().out
    for scenario in bench.SCENARIOS:
        assert scenario in out
    assert "│       25 │     1 │" in out


def test_main_bad_settings_exits_1(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{broken")
    assert bench.main(["--settings", str(path)]) == 1


def test_main_wrongly_typed_settings_exits_1(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"bench_runs": "5"}))
    assert bench.main(["--settings", str(path), "--elements", "5"]) == 1


@pytest.mark.parametrize("flag", ["--elements", "--runs"])
def test_main_rejects_negative_counts(flag, capsys):
    with pytest.raises(SystemExit) as exc:
        bench.main([flag, "-1"])
    assert exc.value.code == 2
    assert "non-negative" in capsys.readouterr().err


@pytest.mark.parametrize("elements, runs", [(-1, 1), (5, -1)])
def test_time_trials_rejects_negative_counts(elements, runs):
    with pytest.raises(ValueError):
        bench.time_trials("ascending", elements, runs)


def test_time_trials_zero_runs():
    res = bench.time_trials("ascending", 5, 0)
    assert (res.runs, res.mean, res.best, res.worst) == (0, 0.0, 0.0, 0.0)
