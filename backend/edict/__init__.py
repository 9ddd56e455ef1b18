"""Parser for the EDICT2 Japanese/English dictionary format."""

__version__ = "0.1.0"
