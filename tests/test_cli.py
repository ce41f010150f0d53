from pathlib import Path

import pytest

from schedsim.cli import main
from schedsim.report import render_title


def test_main_prints_all_algorithms(tmp_path: Path, capsys):
    p = tmp_path / "w.csv"
    p.write_text("1,5,0,2\n2,3,1,1\n3,8,2,3\n")
    assert main([str(p)]) == 0

    out = capsys.readouterr().out
    titles = ["First-come, first-serve", "Shortest-job-first", "Priority", "Round-robin"]
    positions = [out.index(render_title(t)) for t in titles]
    assert positions == sorted(positions)
    assert out.count("Gantt schedule") == 4


def test_main_requires_exactly_one_argument(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2

    with pytest.raises(SystemExit) as exc:
        main(["a.csv", "b.csv"])
    assert exc.value.code == 2


def test_main_missing_file(tmp_path: Path, capsys):
    assert main([str(tmp_path / "missing.csv")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error opening scheduling file" in captured.err


def test_main_bad_record_emits_nothing(tmp_path: Path, capsys):
    p = tmp_path / "w.csv"
    p.write_text("1,5,0\n2,x,1\n")
    assert main([str(p)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "line 2" in captured.err
