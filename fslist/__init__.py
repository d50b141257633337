__version__ = '1.0'

from fslist.connector import Connector
from fslist.local import LocalConnector
from fslist.render import TableRenderer
from fslist.transform import Transform, apply_transforms, exclude_hidden, reverse
from fslist.utils.entry import Entry, EntryKind, EntrySet
from fslist.utils.errors import (
    AccessDenied,
    DirectoryNotFound,
    EmptyEntrySet,
    FSListError,
    MetadataUnavailable,
)
from fslist.utils.style import Theme
