"""Mini ETL pipeline for user records."""

__version__ = "0.1.0"
