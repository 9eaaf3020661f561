"""WordTreeLib - Binary Search Tree Word Index.

WordTreeLib records, for every word in a set of text files, the files and
lines it occurs on, and renders that index as sorted reports.

The index lives in a generic binary search tree that can store any
ordered values:

    from wordtreelib import BSTree
    tree = BSTree()
    tree.add(5)

Indexing files:

    from wordtreelib import WordTracker, TrackerConfig
    tracker = WordTracker(TrackerConfig(repository_path="index.ser"))
    tracker.process_file("notes.txt")
"""

__version__ = "1.0.0"

from .config import (
    TraversalOrder,
    ReportFormat,
    TrackerConfig,
    LoggingConfig,
)
from .core import (
    BSTree,
    BSTreeNode,
    TreeIterator,
    InOrderIterator,
    PreOrderIterator,
    PostOrderIterator,
    create_iterator,
    TreeError,
    NullEntryError,
    EmptyTreeError,
)
from .index import (
    FileEntry,
    WordInfo,
    WordTracker,
    load_repository,
    save_repository,
)
from .reports import (
    render_files,
    render_files_with_lines,
    render_full_details,
    render_report,
)
from .api import build_tree, traverse, get_tree_stats
from .log import configure_logging

__all__ = [
    "__version__",
    # Core
    "BSTree",
    "BSTreeNode",
    "TreeIterator",
    "InOrderIterator",
    "PreOrderIterator",
    "PostOrderIterator",
    "create_iterator",
    "TreeError",
    "NullEntryError",
    "EmptyTreeError",
    # Config
    "TraversalOrder",
    "ReportFormat",
    "TrackerConfig",
    "LoggingConfig",
    # Index
    "FileEntry",
    "WordInfo",
    "WordTracker",
    "load_repository",
    "save_repository",
    # Reports
    "render_files",
    "render_files_with_lines",
    "render_full_details",
    "render_report",
    # API
    "build_tree",
    "traverse",
    "get_tree_stats",
    "configure_logging",
]
