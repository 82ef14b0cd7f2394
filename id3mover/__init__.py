"""
id3mover - Music library organization tool.

Moves audio files into a canonical layout built from their tags:
- Reading album artist, album, title, track and disc numbers with mutagen
- Building sanitized Artist/Album/NN - Title paths
- Resolving destination collisions deterministically
- Moving files safely, including across volumes
"""

__version__ = "0.1.0"
