"""Payroll System package.

Console employee record manager organized by feature modules (credentials,
employees, payroll) with a thin console controller layer on top of service and
flat-file repository layers.
"""
