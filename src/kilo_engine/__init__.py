"""Small single-buffer text editor core with a Textual host."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "keymaps",
    "modes",
    "render",
    "runtime",
    "search",
    "session",
    "syntax",
    "view",
]

__version__ = "0.1.0"
