from hexgrids.summary import main


def test_summary_reports_counts(capsys):
    assert main(["3", "2"]) == 0

    out = capsys.readouterr().out
    assert "grid:      3 x 2" in out
    assert "cells:     6" in out
    assert "edges:     24 (12 interior, 12 boundary)" in out


def test_summary_rejects_empty_grid(capsys):
    assert main(["0", "2"]) == 2

    assert "Invalid grid size" in capsys.readouterr().out
