"""
slicekit CLI

Commands:
- slicekit inspect - Show the types, creators and selectors a slice derives
- slicekit replay - Replay an action log through a slice reducer
- slicekit log append/tail - Action log operations
"""

__version__ = "0.1.0"
