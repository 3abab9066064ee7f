"""
Result formatting for the command-line interface.
"""

from typing import List

from .occurrence import Occurrence


class ResultFormatter:
    """Handles result formatting and display."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def format_results_table(self, ranked: List[Occurrence], keywords: List[str]) -> str:
        """
        Render ranked documents as an ASCII table.

        Args:
            ranked: Occurrences in rank order.
            keywords: Keywords the query was run with.

        Returns:
            The table as a string.
        """
        if not ranked:
            return "No matching documents found."

        rows = []
        for rank, occ in enumerate(ranked, start=1):
            row = [str(rank), occ.document]
            if self.config.SHOW_SCORES:
                row.append(str(occ.frequency))
            rows.append(row)

        headers = ["#", "Document"]
        if self.config.SHOW_SCORES:
            headers.append("Frequency")

        max_widths = [3, self.config.MAX_DOCUMENT_CHARS, 9]
        col_widths = []
        for j, h in enumerate(headers):
            width = len(h)
            for row in rows:
                width = max(width, len(row[j]))
            col_widths.append(min(width, max_widths[j]))

        def clip_pad(s, w):
            if len(s) > w:
                return s[: max(0, w - 1)] + "…" if w >= 2 else s[:w]
            return s.ljust(w)

        lines = ["=== Top Results ==="]
        lines.append(" | ".join(clip_pad(h, col_widths[i]) for i, h in enumerate(headers)))
        lines.append("-+-".join("-" * w for w in col_widths))
        for row in rows:
            lines.append(" | ".join(clip_pad(row[i], col_widths[i]) for i in range(len(headers))))
        lines.append(f"(keywords: {' or '.join(k for k in keywords if k) or '-'})")
        return "\n".join(lines)

    def print_results_table(self, ranked: List[Occurrence], keywords: List[str]) -> None:
        """Print ranked documents as an ASCII table."""
        print()
        print(self.format_results_table(ranked, keywords))
        print()
