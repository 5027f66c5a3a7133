"""Domain availability checker built on the Domainr status API."""

__version__ = "1.0.0"
