"""Index entry types stored in the word tree.

A WordInfo is the payload of one tree node. Its ordering key (the
lowercased word) is fixed at construction; its per-file records are
mutated in place as new occurrences are found.
"""

from functools import total_ordering
from typing import List, Tuple


class FileEntry:
    """Occurrences of one word within one file.

    Line numbers keep insertion order and are never duplicated, so the
    frequency of a word in a file is the number of distinct lines it
    appears on.
    """

    __slots__ = ("_file_name", "_line_numbers")

    def __init__(self, file_name: str):
        if file_name is None:
            raise ValueError("file_name cannot be None")
        self._file_name = file_name
        self._line_numbers: List[int] = []

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def line_numbers(self) -> Tuple[int, ...]:
        """Line numbers in the order first seen (read-only view)."""
        return tuple(self._line_numbers)

    @property
    def frequency(self) -> int:
        return len(self._line_numbers)

    def add_line_number(self, line_number: int) -> bool:
        """Record a line number.

        Returns:
            True if recorded, False if the line was already present
        """
        if line_number in self._line_numbers:
            return False
        self._line_numbers.append(line_number)
        return True

    def __getstate__(self):
        return (self._file_name, self._line_numbers)

    def __setstate__(self, state):
        self._file_name, self._line_numbers = state

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileEntry):
            return NotImplemented
        return (self._file_name == other._file_name
                and self._line_numbers == other._line_numbers)

    def __repr__(self) -> str:
        return (f"FileEntry({self._file_name!r}, frequency={self.frequency}, "
                f"lines={self._line_numbers})")


@total_ordering
class WordInfo:
    """A word and every file/line it was seen at.

    Instances compare and hash by their lowercased word only, so a bare
    ``WordInfo("Cat")`` works as a search probe for the stored entry.

    Example:
        info = WordInfo("Cat")
        info.add_occurrence("f1", 1)
        info.add_occurrence("f1", 2)
        info.total_frequency        # 2
    """

    __slots__ = ("_word", "_file_entries")

    def __init__(self, word: str):
        if word is None:
            raise ValueError("word cannot be None")
        self._word = word.lower()
        self._file_entries: List[FileEntry] = []

    @property
    def word(self) -> str:
        """The ordering key. Read-only once constructed."""
        return self._word

    @property
    def file_entries(self) -> Tuple[FileEntry, ...]:
        """Per-file records in the order files were first seen."""
        return tuple(self._file_entries)

    @property
    def total_frequency(self) -> int:
        """Sum of per-file frequencies."""
        return sum(entry.frequency for entry in self._file_entries)

    def add_occurrence(self, file_name: str, line_number: int) -> bool:
        """Record that this word was seen at ``file_name:line_number``.

        Returns:
            True if a new line number was recorded, False if that line was
            already known for the file
        """
        entry = self.file_entry(file_name)
        if entry is None:
            entry = FileEntry(file_name)
            self._file_entries.append(entry)
        return entry.add_line_number(line_number)

    def file_entry(self, file_name: str):
        """Return the FileEntry for ``file_name`` or None."""
        for entry in self._file_entries:
            if entry.file_name == file_name:
                return entry
        return None

    def file_names(self) -> List[str]:
        return [entry.file_name for entry in self._file_entries]

    def __getstate__(self):
        return (self._word, self._file_entries)

    def __setstate__(self, state):
        self._word, self._file_entries = state

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordInfo):
            return NotImplemented
        return self._word == other._word

    def __lt__(self, other: "WordInfo") -> bool:
        if not isinstance(other, WordInfo):
            return NotImplemented
        return self._word < other._word

    def __hash__(self) -> int:
        return hash(self._word)

    def __str__(self) -> str:
        return f"{self._word} (total frequency: {self.total_frequency})"

    def __repr__(self) -> str:
        return f"WordInfo({self._word!r}, files={self.file_names()})"
