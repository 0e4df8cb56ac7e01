"""In-memory hospital registry of patients, doctors and medical tests."""

__version__ = "0.1.0"
__all__ = ["hospital", "records"]