import runpy
from pathlib import Path

import tableau as tableau_module

SCRIPT = Path(__file__).parent.parent / "linear-programming.py"


def test_script_solves_example(monkeypatch, capsys):
    # The script switches tracing on, restore it afterwards
    monkeypatch.setattr(tableau_module, "PRINT", False)
    runpy.run_path(str(SCRIPT), run_name="__main__")
    out = capsys.readouterr().out

    assert "Is inital BFS feasible:  True" in out
    assert "Pivoting: moving variable x2 into the basis at row 2." in out
    assert "x1 = 5" in out
    assert "x2 = 6" in out
    assert "z = 28" in out
