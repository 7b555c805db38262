"""Invoice tracker backend: FastAPI over a Supabase invoice table."""

__version__ = "0.1.0"
