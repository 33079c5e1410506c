"""
db/ - Database Layer
====================
Owns the PostgreSQL connection pool, the schema, seed fixtures and the
exception types raised by the data-access layer.
Apart from the seed loader, nothing here depends on the layers above it.
"""
