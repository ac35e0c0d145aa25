"""
keyrank: TextRank keyword extraction with a CLI and an HTTP API.
"""

__version__ = "0.1.0"
