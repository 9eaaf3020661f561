#!/usr/bin/env python3
"""
Run the scripts in examples/ to make sure they still work.
"""

import runpy
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

EXAMPLES = Path(__file__).parent.parent / "examples"


def test_index_files_example(tmp_path, monkeypatch, capsys):
    """index_files.py indexes the given file and prints the summary and report."""
    sample = tmp_path / "sample.txt"
    sample.write_text("The tracker\nreads the tracker file\n", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["index_files.py", str(sample)])

    runpy.run_path(str(EXAMPLES / "index_files.py"), run_name="__main__")

    out = capsys.readouterr().out
    assert "Indexed 6 words from" in out
    assert "'tracker' appears 2 times in 1 file(s)" in out
    assert "\nIndex Summary:\n" in out
    assert "  Distinct words: 4" in out
    assert "  First word:     file" in out
    assert "tracker (total frequency: 2):" in out
