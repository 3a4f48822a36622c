"""
CHUK Glyphs - Unicode text styling with message-embedded state.
"""

__version__ = "0.1.0"
