"""
models/result.py
----------------
Tabular query result as handed back to the shell for display.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ResultTable:
    """
    Rows returned by a read statement, every value rendered as text.

    Attributes:
        columns: Column names in projection order.
        rows: One list of values per row; SQL NULL stays None.
    """
    columns: list[str]
    rows: list[list[Optional[str]]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)

    def column(self, name: str) -> list[Optional[str]]:
        """Values of one column, matched case-insensitively."""
        lowered = [c.lower() for c in self.columns]
        idx = lowered.index(name.lower())
        return [row[idx] for row in self.rows]

    def to_lines(self) -> list[str]:
        """Tab-separated header and rows. Empty when there are no rows."""
        if not self.rows:
            return []
        lines = ["\t".join(self.columns)]
        for row in self.rows:
            lines.append("\t".join("null" if v is None else v for v in row))
        return lines
