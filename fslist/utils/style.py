from dataclasses import dataclass, fields

import yaml
from rich.style import Style

from fslist.utils.entry import EntryKind


@dataclass
class Theme:
    """Table styles.

    Attributes
    ----------
    header : str
        Header line style.
    file : str
        Name style of file entries.
    directory : str
        Name style of directory entries.
    even_row : str
        Background of rows at even positions.
    odd_row : str
        Background of rows at odd positions.
    """

    header: str = 'black on yellow'
    file: str = 'green'
    directory: str = 'blue'
    even_row: str = 'on bright_black'
    odd_row: str = 'on black'

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str):
                raise ValueError(f"Theme style '{f.name}' must be a string, got {value!r}")
            Style.parse(value)

    @classmethod
    def from_yaml(cls, path: str) -> 'Theme':
        """Creates class instance from configuration path.

        Parameters
        ----------
        path : str
            path to configuration file.

        Returns
        -------
        Theme
            Class instance.
        """
        with open(path) as f:
            config = yaml.safe_load(f) or {}
        if not isinstance(config, dict):
            raise ValueError(f"Theme config must be a mapping: '{path}'")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config) - known)
        if unknown:
            raise ValueError(f"Unknown theme keys in '{path}': {', '.join(unknown)}")
        return cls(**config)


def header_style(theme: Theme) -> Style:
    return Style.parse(theme.header)


def kind_style(kind: EntryKind, theme: Theme) -> Style:
    if kind is EntryKind.FILE:
        return Style.parse(theme.file)
    return Style.parse(theme.directory)


def row_style(position: int, theme: Theme) -> Style:
    if position % 2 == 0:
        return Style.parse(theme.even_row)
    return Style.parse(theme.odd_row)
