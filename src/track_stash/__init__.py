"""
Track Stash - OAuth gateway that appends the playing Spotify track to a playlist.
"""

__version__ = "1.0.0"
