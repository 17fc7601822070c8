"""
db/ - Database Layer
====================
Handles PostgreSQL connections, schema initialization, row mapping and the
persistence error type. This layer is the lowest in the architecture and
has no dependencies on other layers.
"""
