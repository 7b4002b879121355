"""Source positions carried from HTML input to markdown output.

Every hast node may record where it came from. Conversion copies that
position onto the mdast node built from it (see ``State.patch``), so tools
downstream can map markdown back to the original document.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a node in its source document.

    Lines are 1-indexed, columns are 0-indexed (matching ``html.parser``).

    Attributes:
        lineno: Starting line number
        col_offset: Starting column offset
        end_lineno: Ending line number (optional)
        end_col_offset: Ending column offset (optional)
        source_file: Source file path (optional)

    Examples:
        >>> loc = SourceLocation(lineno=3, col_offset=4)
        >>> str(loc)
        '3:4'

    """

    lineno: int
    col_offset: int
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"
