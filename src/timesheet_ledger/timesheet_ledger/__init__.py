"""Timesheet Ledger package.

This package is organized by feature modules (punches, ledger, shifts, ...)
with a thin Flask controller layer on top of plain service classes.
"""
