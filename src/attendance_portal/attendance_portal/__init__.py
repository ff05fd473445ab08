"""Attendance Portal package.

This package is organized by feature modules (employees, attendance, qr, portal)
with a thin Flask controller layer and service/repository layers.
"""
