"""Word indexing on top of the core tree.

This package holds the entry types stored in the tree, the tokenizer,
whole-tree persistence and the WordTracker that ties them together.
"""

from .entry import FileEntry, WordInfo
from .tokenizer import LineTokenizer, tokenize_line
from .repository import (
    RepositoryError,
    load_repository,
    read_repository,
    save_repository,
)
from .tracker import WordTracker

__all__ = [
    "FileEntry",
    "WordInfo",
    "LineTokenizer",
    "tokenize_line",
    "RepositoryError",
    "load_repository",
    "read_repository",
    "save_repository",
    "WordTracker",
]
