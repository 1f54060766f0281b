"""Console register of vehicles kept in fixed-size binary records with a CSV export."""

__version__ = "1.0.0"
__all__ = ["carro", "storage", "console", "cli"]