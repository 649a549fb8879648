"""flac-folders: organise loose FLAC files into an Artist/Album (Year) tree."""

__version__ = "0.1.0"
