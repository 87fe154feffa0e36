"""ShowCatalog : navigation dans un catalogue de séries et de leurs épisodes."""

__version__ = "0.1.0"
