class HuffError(ValueError):
    """Base class for every codec failure."""

class MalformedHeaderError(HuffError):
    """Bad magic, unsupported version, or a truncated/invalid tree header."""

class TruncatedStreamError(HuffError):
    """Input ended before the end-of-stream symbol was decoded."""

class TreeConstructionError(HuffError):
    """Frequency table cannot produce a tree."""
