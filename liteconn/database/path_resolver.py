"""Connection target validation."""

import os
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from liteconn.constants import MEMORY_TARGET
from liteconn.exceptions import ConfigurationError
from liteconn.log import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ResolvedTarget:
    """A validated connection target."""

    path: str
    in_memory: bool
    read_only: bool


def resolve_target(target: str) -> ResolvedTarget:
    """Validate a database target and work out whether it is read-only.

    The in-memory sentinel is returned untouched without looking at the
    filesystem. Anything else is made absolute and checked: the parent
    directory must exist, and a file that does not exist yet must be
    creatable.

    Args:
        target: Filesystem path (relative or absolute) or ``:memory:``

    Returns:
        Resolved target

    Raises:
        ConfigurationError: If a parent directory is missing or the file
            cannot be created
    """
    if target == MEMORY_TARGET:
        return ResolvedTarget(path=MEMORY_TARGET, in_memory=True, read_only=False)

    file = Path(target).absolute()
    missing = find_missing_ancestor(file)
    if missing is not None:
        raise ConfigurationError(
            f"path to '{target}': '{missing}' does not exist", path=missing
        )

    if not file.exists():
        try:
            with trial_create(file):
                pass
        except OSError as e:
            raise ConfigurationError(f"opening db: '{target}': {e}", path=file) from e

    read_only = file.exists() and not os.access(file, os.W_OK)
    logger.debug(f"Resolved database target {file} (read_only={read_only})")
    return ResolvedTarget(path=str(file), in_memory=False, read_only=read_only)


def find_missing_ancestor(file: Path) -> Path | None:
    """Return the highest missing directory above ``file``, if any.

    That is the directory directly below the deepest ancestor that exists,
    which is where the filesystem first diverges from the requested path.
    """
    parent = file.parent
    if parent.exists():
        return None

    missing = parent
    for up in parent.parents:
        if up.exists():
            break
        missing = up
    return missing


@contextmanager
def trial_create(file: Path) -> Iterator[bool]:
    """Create ``file`` for the duration of the block, then delete it.

    Yields whether the trial created the file. A file that appeared
    between the existence check and the trial is left alone.
    """
    try:
        file.touch(exist_ok=False)
    except FileExistsError:
        yield False
        return

    try:
        yield True
    finally:
        file.unlink(missing_ok=True)
