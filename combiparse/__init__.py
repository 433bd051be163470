"""Parser combinators, character parsers and two JSON parsers built from them."""

__version__ = "0.1.0"
__all__ = [
    "parser",
    "combinators",
    "chars",
    "json_method",
    "json_functional",
    "cli",
]