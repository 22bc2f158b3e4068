"""Rich-based presentation for analyses and band classifications.

Modules:
- display.py: Rich renderables for panels/tables
- renderer.py: Formatting utilities
- config.py: Styles and band colors
"""

__all__ = [
    "display",
    "renderer",
    "config",
]
