"""
termsnake - a threaded terminal snake game.
"""

__version__ = "0.1.0"
