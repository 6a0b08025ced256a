"""Admin Dashboard package.

This package is organized by feature modules (employees, payroll, orders, ...)
on top of a shared in-memory record manager, with a thin Flask controller layer.
"""
