"""AEO Scanner - score web pages for answer-engine extraction and citation."""

__version__ = "1.0.0"
