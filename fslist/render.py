from typing import List, Optional

from rich.text import Text

from fslist.utils.entry import Entry, EntrySet
from fslist.utils.errors import EmptyEntrySet
from fslist.utils.style import Theme, header_style, kind_style, row_style

NAME_HEADER = 'name'
HEADERS = ('#', NAME_HEADER, 'Len', 'Mod At', 'Readonly', 'Kind')
MIN_NAME_WIDTH = len(NAME_HEADER)


class TableRenderer:
    """Entry set to styled table lines.

    Attributes
    ----------
    theme : Theme
        Table styles.
    allow_empty : bool
        Render a header-only table for empty sets instead of raising EmptyEntrySet.
    """

    def __init__(self, theme: Optional[Theme] = None, allow_empty: bool = True):
        self.theme = theme if theme is not None else Theme()
        self.allow_empty = allow_empty

    def render(self, entry_set: EntrySet) -> List[Text]:
        """Render header and one line per entry.

        Parameters
        ----------
        entry_set : EntrySet
            Entries in display order.

        Returns
        -------
        List[Text]
            Header line followed by entry lines.
        """
        if not len(entry_set) and not self.allow_empty:
            raise EmptyEntrySet('Nothing to render: entry set is empty')
        # never narrower than the header label
        width = max(entry_set.max_name_length, MIN_NAME_WIDTH)
        lines = [self.header(width)]
        for position, entry in enumerate(entry_set):
            lines.append(self.row(position, entry, width))
        return lines

    def header(self, width: int) -> Text:
        index, name, size, modified, readonly, kind = HEADERS
        line = f"{index:2} {name:{width}} {size:4} {modified:7} {readonly:8} {kind:5}"
        return Text(line, style=header_style(self.theme))

    def row(self, position: int, entry: Entry, width: int) -> Text:
        line = Text(style=row_style(position, self.theme))
        line.append(f"{position:2} ")
        line.append(f"{entry.name:{width}}", style=kind_style(entry.kind, self.theme))
        readonly = str(entry.readonly).lower()
        line.append(f" {entry.size:4} {entry.modified_age:7} {readonly:8} {entry.kind.label:5}")
        return line
