"""
dao/ - Record Accessors
=======================
One data access object per table. Each performs bound-parameter SQL
against PostgreSQL and maps rows to flat model records. Nothing here
composes records from different tables; that is the repository's job.
"""
