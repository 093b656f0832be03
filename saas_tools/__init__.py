"""Developer CLI for generating database tables, Supabase SQL and Flutter/Dart boilerplate."""

__version__ = "0.1.0"
