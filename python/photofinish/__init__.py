"""PhotoFinish — slide the tiles of a photo back into place."""

__version__ = "0.1.0"
