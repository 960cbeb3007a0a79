"""
Console Utilities - output helpers for the run_*.py scripts.
Status symbols fall back to ASCII on Windows consoles, where the default
code page cannot encode them.
"""

import os

# name -> (unicode, ascii fallback)
_SYMBOLS = {
    'OK': ("✓", "[OK]"),
    'FAIL': ("✗", "[ERROR]"),
    'WARN': ("!", "[WARN]"),
    'INFO': ("ℹ", "[INFO]"),
}

SEPARATOR_WIDTH = 80


def is_windows() -> bool:
    return os.name == 'nt'


class Symbol:
    """Status markers for console output (``symbol.OK``, ``symbol.FAIL``...)."""

    def __getattr__(self, name: str) -> str:
        try:
            unicode_mark, ascii_mark = _SYMBOLS[name]
        except KeyError:
            raise AttributeError(name) from None
        return ascii_mark if is_windows() else unicode_mark


# Global instance
symbol = Symbol()


def print_header(title: str):
    """Print a boxed section title."""
    print("\n" + "=" * SEPARATOR_WIDTH)
    print(f"  {title}")
    print("=" * SEPARATOR_WIDTH)


def print_step(step: int, total: int, message: str):
    """Print a numbered step header, e.g. ``[2/3] Computing Macro Analysis``."""
    header = f"[{step}/{total}] {message}"
    print(f"\n{header}")
    print("-" * len(header))


def print_separator():
    print("=" * SEPARATOR_WIDTH)
