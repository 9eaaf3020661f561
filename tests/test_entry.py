"""Unit tests for WordInfo and FileEntry."""

import pickle
import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from wordtreelib import BSTree, FileEntry, WordInfo


class TestFileEntry(unittest.TestCase):

    def test_new_entry_is_empty(self):
        entry = FileEntry("f1")
        self.assertEqual(entry.file_name, "f1")
        self.assertEqual(entry.line_numbers, ())
        self.assertEqual(entry.frequency, 0)

    def test_line_numbers_keep_insertion_order(self):
        entry = FileEntry("f1")
        for n in (7, 2, 9):
            self.assertTrue(entry.add_line_number(n))
        self.assertEqual(entry.line_numbers, (7, 2, 9))

    def test_duplicate_line_suppressed(self):
        entry = FileEntry("f1")
        self.assertTrue(entry.add_line_number(1))
        self.assertFalse(entry.add_line_number(1))
        self.assertEqual(entry.line_numbers, (1,))
        self.assertEqual(entry.frequency, 1)

    def test_line_numbers_view_is_read_only(self):
        entry = FileEntry("f1")
        entry.add_line_number(1)
        lines = entry.line_numbers
        with self.assertRaises(AttributeError):
            lines.append(2)
        self.assertEqual(entry.line_numbers, (1,))

    def test_none_file_name_rejected(self):
        with self.assertRaises(ValueError):
            FileEntry(None)


class TestWordInfo(unittest.TestCase):

    def test_word_is_lowercased(self):
        self.assertEqual(WordInfo("HeLLo").word, "hello")

    def test_word_is_read_only(self):
        info = WordInfo("cat")
        with self.assertRaises(AttributeError):
            info.word = "dog"

    def test_none_word_rejected(self):
        with self.assertRaises(ValueError):
            WordInfo(None)

    def test_comparison_by_key(self):
        self.assertEqual(WordInfo("Cat"), WordInfo("cat"))
        self.assertLess(WordInfo("apple"), WordInfo("banana"))
        self.assertGreater(WordInfo("zebra"), WordInfo("apple"))
        self.assertEqual(hash(WordInfo("Cat")), hash(WordInfo("cat")))

    def test_equality_ignores_occurrences(self):
        a = WordInfo("cat")
        a.add_occurrence("f1", 3)
        self.assertEqual(a, WordInfo("cat"))

    def test_add_occurrence_groups_by_file(self):
        info = WordInfo("cat")
        info.add_occurrence("f1", 1)
        info.add_occurrence("f2", 4)
        info.add_occurrence("f1", 2)

        self.assertEqual(info.file_names(), ["f1", "f2"])
        self.assertEqual(info.file_entry("f1").line_numbers, (1, 2))
        self.assertEqual(info.file_entry("f2").line_numbers, (4,))
        self.assertIsNone(info.file_entry("f3"))

    def test_total_frequency_is_sum_of_files(self):
        info = WordInfo("cat")
        info.add_occurrence("f1", 1)
        info.add_occurrence("f1", 2)
        info.add_occurrence("f2", 1)
        self.assertEqual(info.total_frequency, 3)

    def test_same_line_twice_counts_once(self):
        info = WordInfo("cat")
        self.assertTrue(info.add_occurrence("f1", 1))
        self.assertFalse(info.add_occurrence("f1", 1))
        self.assertEqual(info.file_entry("f1").line_numbers, (1,))
        self.assertEqual(info.total_frequency, 1)

    def test_str(self):
        info = WordInfo("cat")
        info.add_occurrence("f1", 1)
        self.assertEqual(str(info), "cat (total frequency: 1)")

    def test_pickle_round_trip_keeps_occurrences(self):
        info = WordInfo("cat")
        info.add_occurrence("f1", 1)
        info.add_occurrence("f2", 5)

        restored = pickle.loads(pickle.dumps(info))
        self.assertEqual(restored.word, "cat")
        self.assertEqual(restored.file_entries, info.file_entries)


class TestWordInfoInTree(unittest.TestCase):
    """WordInfo as the payload of a BSTree."""

    def test_probe_finds_stored_entry(self):
        tree = BSTree()
        stored = WordInfo("cat")
        stored.add_occurrence("f1", 1)
        tree.add(stored)

        node = tree.search(WordInfo("CAT"))
        self.assertIs(node.value, stored)

    def test_mutating_found_entry_keeps_order(self):
        tree = BSTree()
        for word in ("mouse", "cat", "zebra", "ant"):
            tree.add(WordInfo(word))

        tree.search(WordInfo("cat")).value.add_occurrence("f9", 12)

        self.assertEqual([w.word for w in tree], ["ant", "cat", "mouse", "zebra"])
        self.assertEqual(tree.search(WordInfo("cat")).value.total_frequency, 1)

    def test_duplicate_word_rejected(self):
        tree = BSTree()
        self.assertTrue(tree.add(WordInfo("Cat")))
        self.assertFalse(tree.add(WordInfo("cat")))
        self.assertEqual(tree.size(), 1)


if __name__ == "__main__":
    unittest.main()
