from abc import ABC, abstractmethod
from typing import Optional

from fslist.utils.entry import EntrySet


class Connector(ABC):
    """Abstract class for connector."""

    @abstractmethod
    def scandir(self, path: str, as_of: Optional[float] = None) -> EntrySet:
        """List directory content with metadata.

        Parameters
        ----------
        path : str
            Directory path.
        as_of : float, optional
            Reference timestamp for entry ages, current time if omitted.

        Returns
        -------
        EntrySet
            Directory contents in enumeration order.

        Raises
        ------
        DirectoryNotFound
            If the path does not exist or is not a directory.
        AccessDenied
            If the directory can not be enumerated.
        MetadataUnavailable
            If metadata of any member can not be read.
        """
        pass
