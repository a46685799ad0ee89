"""Attendance & payroll package.

Feature modules (calendar_month, attendance, employees, payroll) keep the
business rules in plain services; Flask and MySQL stay at the edges.
"""
