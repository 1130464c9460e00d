"""
db/ - Database Layer
====================
Handles the PostgreSQL connection pool, schema initialization and the
error types raised by the data access layer.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
