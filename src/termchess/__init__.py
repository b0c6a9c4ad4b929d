"""termchess — a two-player terminal chess game built on a small rules engine."""

__version__ = "0.1.0"
