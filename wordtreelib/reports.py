"""Report rendering for the word index.

Every report walks one in-order snapshot of the tree, so words always
come out alphabetically. Reports write to any text stream (stdout by
default).
"""

import sys
from typing import Callable, Dict, Optional, TextIO, Union

from .config import ReportFormat
from .core import BSTree


def _format_lines(line_numbers) -> str:
    return ", ".join(str(n) for n in line_numbers)


def render_files(tree: BSTree, stream: Optional[TextIO] = None) -> None:
    """Word followed by the files it appears in.

    Output:
        cat:
          f1.txt
          f2.txt
    """
    out = stream or sys.stdout
    for info in tree.inorder_iterator():
        out.write(f"{info.word}:\n")
        for entry in info.file_entries:
            out.write(f"  {entry.file_name}\n")


def render_files_with_lines(tree: BSTree, stream: Optional[TextIO] = None) -> None:
    """Word followed by its files and line numbers.

    Output:
        cat:
          f1.txt - lines: 1, 2
    """
    out = stream or sys.stdout
    for info in tree.inorder_iterator():
        out.write(f"{info.word}:\n")
        for entry in info.file_entries:
            out.write(f"  {entry.file_name} - lines: {_format_lines(entry.line_numbers)}\n")


def render_full_details(tree: BSTree, stream: Optional[TextIO] = None) -> None:
    """Word, files, line numbers and both per-file and total frequencies.

    Output:
        cat (total frequency: 2):
          f1.txt (frequency: 2) - lines:
            1, 2

    A blank line follows each word.
    """
    out = stream or sys.stdout
    for info in tree.inorder_iterator():
        out.write(f"{info.word} (total frequency: {info.total_frequency}):\n")
        for entry in info.file_entries:
            out.write(f"  {entry.file_name} (frequency: {entry.frequency}) - lines:\n")
            out.write(f"    {_format_lines(entry.line_numbers)}\n")
        out.write("\n")


_RENDERERS: Dict[ReportFormat, Callable[[BSTree, Optional[TextIO]], None]] = {
    ReportFormat.FILES: render_files,
    ReportFormat.FILES_WITH_LINES: render_files_with_lines,
    ReportFormat.FULL_DETAILS: render_full_details,
}


def render_report(tree: BSTree,
                  report_format: Union[ReportFormat, str],
                  stream: Optional[TextIO] = None) -> None:
    """Render the report selected by ``report_format``.

    Args:
        tree: Index of WordInfo entries
        report_format: ReportFormat or its flag ('pf', '-pl', ...)
        stream: Destination (stdout if None)

    Raises:
        ValueError: If the format is not recognized
    """
    if not isinstance(report_format, ReportFormat):
        report_format = ReportFormat(str(report_format).lstrip("-"))
    _RENDERERS[report_format](tree, stream)
