"""Unit tests.

Purpose
- Verify the data-access functions, engine helpers and schema loader quickly.

Guidelines
- No Docker; the database is SQLite in memory via aiosqlite.
- Use fakes at the connection boundary when the store cannot produce a case.
"""
