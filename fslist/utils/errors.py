class FSListError(Exception):
    """Base class for listing errors."""

    def __init__(self, message: str, path: str = ''):
        super().__init__(message)
        self.path = path

    @property
    def kind(self) -> str:
        return type(self).__name__


class DirectoryNotFound(FSListError):
    pass


class AccessDenied(FSListError):
    pass


class MetadataUnavailable(FSListError):
    pass


class EmptyEntrySet(FSListError):
    pass
