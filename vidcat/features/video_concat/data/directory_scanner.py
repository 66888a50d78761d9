import logging
from pathlib import Path
from typing import List, Optional

from vidcat.core.errors import AccessDeniedError, FolderNotFoundError
from ..domain.interfaces import IDirectoryScanner
from ..domain.models import ScanFilter

logger = logging.getLogger(__name__)


def extension_of(name: str) -> Optional[str]:
    """
    Returns the text after the last dot of a file name.

    Names without a dot, and dotfiles whose only dot is the leading one
    (".mp4"), have no extension at all. "clip." has an empty one.
    """
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return None
    return ext


class LocalDirectoryScanner(IDirectoryScanner):
    """
    Non-recursive scan of a single directory using pathlib.
    """

    def scan(self, scan_filter: ScanFilter) -> List[str]:
        root = scan_filter.directory
        if not root.exists():
            raise FolderNotFoundError(f"Scan folder not found: {root}")

        try:
            entries = list(root.iterdir())
        except OSError as e:
            raise AccessDeniedError(f"Cannot list folder {root}: {e}") from e

        wanted_ext = scan_filter.extension.lower()
        paths = []
        for item in entries:
            if not self._matches(item, scan_filter.prefix, wanted_ext):
                continue
            paths.append(str(item))

        # Concatenation order: plain code point order of the full path
        paths.sort()
        logger.info(f"Scanned {root}: {len(paths)}/{len(entries)} entries matched")
        return paths

    def _matches(self, item: Path, prefix: str, wanted_ext: str) -> bool:
        name = item.name
        ext = extension_of(name)
        if ext is None or ext.lower() != wanted_ext:
            return False
        if not name.startswith(prefix):
            return False

        # Names that are not valid UTF-8 cannot go into the manifest
        try:
            name.encode("utf-8")
        except UnicodeEncodeError:
            logger.debug(f"Skipping non UTF-8 file name {name!r}")
            return False

        # An entry we cannot stat is skipped, it never fails the whole scan
        try:
            return item.is_file()
        except OSError as e:
            logger.debug(f"Skipping unreadable entry {item}: {e}")
            return False
