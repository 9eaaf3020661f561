"""The word indexer.

WordTracker reads text files line by line and records every word
occurrence in a BSTree of WordInfo entries, then saves the whole tree so
the next run continues from where this one stopped.
"""

from pathlib import Path
from typing import Optional, Union

from ..config import TrackerConfig
from ..core import BSTree
from ..log import get_logger
from .entry import WordInfo
from .repository import load_repository, save_repository
from .tokenizer import LineTokenizer

logger = get_logger(__name__)


class WordTracker:
    """Builds and holds the word index.

    Example:
        tracker = WordTracker(TrackerConfig(repository_path="index.ser"))
        tracker.process_file("chapter1.txt")
        info = tracker.lookup("whale")
        info.total_frequency
    """

    def __init__(self, config: Optional[TrackerConfig] = None,
                 tree: Optional[BSTree] = None):
        """Create a tracker.

        Args:
            config: Tracker settings (defaults to TrackerConfig())
            tree: Index to extend. When omitted the index is loaded from
                the repository (or starts empty if persistence is off)

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config or TrackerConfig()
        errors = self.config.validate()
        if errors:
            raise ValueError(f"Invalid configuration: {'; '.join(errors)}")

        if tree is not None:
            self._tree = tree
        elif self.config.persist:
            self._tree = load_repository(self.config.repository_path)
        else:
            self._tree = BSTree()

        self._tokenize = LineTokenizer(self.config.tokenizer_cache_size)

    @property
    def tree(self) -> BSTree:
        return self._tree

    def word_count(self) -> int:
        """Number of distinct words indexed."""
        return self._tree.size()

    def lookup(self, word: str) -> Optional[WordInfo]:
        """Return the entry for ``word`` (any case) or None."""
        node = self._tree.search(WordInfo(word))
        return node.value if node is not None else None

    def process_file(self, path: Union[str, Path]) -> int:
        """Index every word in a text file, then save the repository.

        The file is identified in the index by ``path`` as given.

        Args:
            path: Text file to read

        Returns:
            Number of word occurrences processed

        Raises:
            OSError: If the file can't be opened or read (logged, nothing is saved)
        """
        file_name = str(path)
        occurrences = 0
        try:
            with open(path, "r", encoding=self.config.encoding,
                      errors=self.config.encoding_errors) as fh:
                for line_number, line in enumerate(fh, start=1):
                    occurrences += self.process_line(file_name, line, line_number)
        except OSError as e:
            logger.error("Cannot read %s: %s", file_name, e)
            raise

        logger.info("Indexed %d occurrences from %s (%d distinct words total)",
                    occurrences, file_name, self._tree.size())

        if self.config.persist:
            self.save()
        return occurrences

    def process_line(self, file_name: str, line: str, line_number: int) -> int:
        """Index the words of one line.

        Returns:
            Number of words found on the line
        """
        words = self._tokenize(line)
        for word in words:
            self.add_word(word, file_name, line_number)
        return len(words)

    def add_word(self, word: str, file_name: str, line_number: int) -> None:
        """Record one occurrence of ``word``.

        An existing entry is updated in place; its key never changes, so
        the tree stays ordered without re-inserting anything.
        """
        probe = WordInfo(word)
        node = self._tree.search(probe)
        if node is None:
            probe.add_occurrence(file_name, line_number)
            self._tree.add(probe)
        else:
            node.value.add_occurrence(file_name, line_number)

    def save(self) -> bool:
        """Write the index to the configured repository now."""
        return save_repository(self._tree, self.config.repository_path)

    def __repr__(self) -> str:
        return f"WordTracker(words={self.word_count()}, repository={self.config.repository_path!r})"
