# tests/test_drift.py

from datetime import date

import pytest

from mebcal.diagnostics import bayram_drift as bd


def test_collect_and_histogram():
    data = bd.collect(1999, 2001)
    ramazan = data["Ramazan Bayramı"]
    assert (2000, date(2000, 1, 8)) in ramazan
    assert (2000, date(2000, 12, 28)) in ramazan
    hist = bd.occurrence_histogram(ramazan, 1999, 2001)
    assert hist[2] == 1
    assert sum(hist.values()) == 3

def test_mean_drift_is_about_eleven_days():
    np = pytest.importorskip("numpy")
    series = bd.collect(2000, 2030)["Kurban Bayramı"]
    assert bd.mean_drift(np, series) == pytest.approx(-10.9, abs=0.6)

def test_main_prints_summary(capsys):
    pytest.importorskip("numpy")
    assert bd.main(["--from-year", "2020", "--to-year", "2025"]) == 0
    out = capsys.readouterr().out
    assert "Ramazan Bayramı" in out and "Kurban Bayramı" in out
