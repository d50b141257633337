import logging
import os
import time
from typing import Optional

from fslist.connector import Connector
from fslist.utils.entry import EntrySet
from fslist.utils.errors import AccessDenied, DirectoryNotFound
from fslist.utils.metadata import display_name, normalize

logger = logging.getLogger(__name__)


class LocalConnector(Connector):
    """Local file system connector."""

    def scandir(self, path: str, as_of: Optional[float] = None) -> EntrySet:
        if as_of is None:
            as_of = time.time()
        shown = display_name(path)
        try:
            with os.scandir(path) as it:
                entries = [normalize(entry, as_of) for entry in it]
        except (FileNotFoundError, NotADirectoryError) as err:
            raise DirectoryNotFound(f"No such directory: '{shown}'", shown) from err
        except PermissionError as err:
            raise AccessDenied(f"Permission denied: '{shown}'", shown) from err
        except OSError as err:
            # ENAMETOOLONG, ELOOP, EIO and the like
            raise DirectoryNotFound(f"Can't read directory '{shown}': {err.strerror or err}", shown) from err
        logger.debug(f"Collected {len(entries)} entries from '{shown}'")
        return EntrySet(entries)
