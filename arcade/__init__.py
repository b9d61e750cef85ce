"""arcade: asset and user persistence service for a multi-user virtual world."""

__version__ = "0.1.0"
