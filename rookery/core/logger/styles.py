"""
Console Styling Tokens.

Separators, symbols and ANSI codes shared by the reporter, the formatter and
the pipeline phases so that every log block lines up at the same width.
"""


class LogStyle:
    """Separators, glyphs and colors used by every log emitter."""

    WIDTH = 80

    # Session banner / closing summary / table frames
    HEAVY = "━" * WIDTH
    DOUBLE = "═" * WIDTH
    LIGHT = "─" * WIDTH

    ARROW = "»"
    BULLET = "•"
    WARNING = "⚠"
    SUCCESS = "✓"

    INDENT = "  "

    # Console only; file sinks stay plain
    RESET = "\033[0m"
    DIM = "\033[2m"
    BOLD = "\033[1m"
    YELLOW = "\033[33m"
    RED = "\033[31m"

    @classmethod
    def header(cls, title: str) -> str:
        """Three-line banner with `title` centred between heavy rules."""
        return f"\n{cls.HEAVY}\n{f' {title.upper()} ':^{cls.WIDTH}}\n{cls.HEAVY}"
