"""
models/ - Domain Models
=======================
Plain dataclasses for table rows and the composite EmployeeDomain.
"""
