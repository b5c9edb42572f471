"""Content credibility scoring pipeline."""

__version__ = "0.1.0"
