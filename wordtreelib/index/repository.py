"""Whole-tree persistence for the word index.

The index is stored as one pickled BSTree in a fixed-name file. It is
always written and read as a complete snapshot; there is no incremental
update. Persistence problems never stop a run: a bad or missing store
means starting from an empty tree, and a failed save leaves the previous
store in place.
"""

import os
import pickle
import stat
import tempfile
from pathlib import Path
from typing import Union

from ..core import BSTree
from ..log import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


class RepositoryError(Exception):
    """Raised when a repository file exists but can't be turned into a tree."""
    pass


def read_repository(path: PathLike) -> BSTree:
    """Unpickle the tree stored at ``path``.

    Raises:
        FileNotFoundError: If the file does not exist
        RepositoryError: If the file is unreadable, corrupt or not a BSTree
    """
    try:
        with open(path, "rb") as fh:
            tree = pickle.load(fh)
    except FileNotFoundError:
        raise
    except (OSError, pickle.UnpicklingError, EOFError, AttributeError,
            ImportError, IndexError, KeyError, TypeError, ValueError) as e:
        raise RepositoryError(f"cannot read repository {path}: {e}") from e

    if not isinstance(tree, BSTree):
        raise RepositoryError(
            f"repository {path} holds {type(tree).__name__}, not BSTree"
        )
    return tree


def load_repository(path: PathLike) -> BSTree:
    """Load the stored tree, or return a fresh one.

    Args:
        path: Repository file

    Returns:
        The stored tree, or an empty BSTree when the file is missing or
        can't be read (a warning is logged in the latter case)
    """
    try:
        tree = read_repository(path)
    except FileNotFoundError:
        logger.debug("No repository at %s, starting with an empty index", path)
        return BSTree()
    except RepositoryError as e:
        logger.warning("Could not load repository, starting fresh: %s", e)
        return BSTree()

    logger.info("Loaded %d words from %s", tree.size(), path)
    return tree


def _file_mode(target: Path) -> int:
    """Permission bits for a saved repository.

    An existing repository keeps its mode; a new one gets the usual
    0o666 masked by the process umask.
    """
    try:
        return stat.S_IMODE(os.stat(target).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def save_repository(tree: BSTree, path: PathLike) -> bool:
    """Write the whole tree to ``path``.

    The snapshot goes to a temporary file in the same directory first and
    then replaces the target, so a failed save never truncates an existing
    repository.

    Returns:
        True on success, False if the save failed (a warning is logged)
    """
    target = Path(path)
    directory = target.parent
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=str(directory)
        )
        with os.fdopen(fd, "wb") as fh:
            pickle.dump(tree, fh, protocol=pickle.HIGHEST_PROTOCOL)
        # mkstemp creates the file 0600
        os.chmod(tmp_name, _file_mode(target))
        os.replace(tmp_name, target)
        tmp_name = None
    except (OSError, pickle.PicklingError, TypeError, AttributeError) as e:
        logger.warning("Error saving repository %s: %s", target, e)
        return False
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)

    logger.debug("Saved %d words to %s", tree.size(), target)
    return True
