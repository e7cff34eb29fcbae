"""Payroll System package.

Organized by feature modules (employees, attendance, payroll) with plain
domain models, repository protocols and service layers. The salary
calculator itself is a pure function of its inputs.
"""
