"""
Utility functions for formatting text-based reports and tables.

Provides consistent table formatting for scan reports printed by scripts.
"""

from typing import Any, List


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def format_header(self) -> str:
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        """Format value with alignment, clipping text that would overflow the column."""
        text = "" if value is None else str(value)
        if len(text) > self.width:
            text = text[: self.width - 1] + "…"
        return f"{text:{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text tables with aligned columns."""

    def __init__(self, columns: List[Column], total_width: int = 100):
        self.columns = columns
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        self.lines.append(" ".join(col.format_header() for col in self.columns))
        return self

    def add_separator(self, char: str = "-") -> "TableFormatter":
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Raises:
            ValueError: If the number of values does not match the number of columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")
        self.lines.append(
            " ".join(col.format_value(value) for col, value in zip(self.columns, values))
        )
        return self

    def add_line(self, text: str = "") -> "TableFormatter":
        self.lines.append(text)
        return self

    def render(self) -> str:
        return "\n".join(self.lines)


def format_salary(salary_min: Any, salary_max: Any, currency: str) -> str:
    """
    Format an annual salary range for display.

    Examples:
        >>> format_salary(80000, 110000, "USD")
        'USD 80,000-110,000'
        >>> format_salary(None, None, "USD")
        ''
    """
    if salary_min is None and salary_max is None:
        return ""
    low = f"{salary_min:,.0f}" if salary_min is not None else "?"
    high = f"{salary_max:,.0f}" if salary_max is not None else "?"
    return f"{currency} {low}-{high}"


def format_percentage(part: int, total: int) -> str:
    """Format part/total as a one-decimal percentage, or empty when total is zero."""
    if total == 0:
        return ""
    return f"{part / total * 100:.1f}%"
