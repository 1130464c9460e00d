"""
services/ - Business Logic Layer
================================
Payroll arithmetic and report generation built on the repositories.
"""
