"""
repositories/ - Aggregation Layer
=================================
Repositories compose the record accessors in `dao/` into domain objects
and answer questions over them. They never talk to the database directly.
"""
