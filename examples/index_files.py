#!/usr/bin/env python3
"""
Index a handful of text files and print a word report.

This example demonstrates:
- Indexing files without touching a repository on disk
- Looking up a single word
- Rendering the full-details report and tree statistics
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from wordtreelib import TrackerConfig, WordTracker, get_tree_stats, render_report


def main():
    """Index the files named on the command line (or this script)."""
    paths = [Path(p) for p in sys.argv[1:]] or [Path(__file__)]

    tracker = WordTracker(TrackerConfig.in_memory())
    for path in paths:
        count = tracker.process_file(path)
        print(f"Indexed {count:,} words from {path}")
    print("-" * 50)

    info = tracker.lookup("tracker")
    if info is not None:
        print(f"'tracker' appears {info.total_frequency} times in {len(info.file_names())} file(s)")

    stats = get_tree_stats(tracker.tree)
    print("\nIndex Summary:")
    print(f"  Distinct words: {stats['total_nodes']:,}")
    print(f"  Tree height:    {stats['height']}")
    print(f"  First word:     {stats['min'].word if stats['min'] else '-'}")
    print(f"  Last word:      {stats['max'].word if stats['max'] else '-'}")
    print()

    render_report(tracker.tree, "po")


if __name__ == "__main__":
    main()
