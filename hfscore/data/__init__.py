"""
Bar ingestion module.

Canonical bar and instrument models, the append-only bar history and
parsers turning raw payloads into validated bars.
"""
