"""Data stores for persistence.

Stores handle:
- PostgreSQL: engine, sessions, the read gateway

No business/shaping logic in stores - that belongs in services.
"""
