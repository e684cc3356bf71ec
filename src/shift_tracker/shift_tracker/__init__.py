"""Shift Tracker package.

Restaurant staff scheduling and time tracking, organized by feature modules
(employees, shifts, timeclock, tips, payroll, ...) with a thin Flask JSON
controller layer over service/repository layers. The wage and tip arithmetic
lives in ``timecalc`` and ``payroll`` and has no I/O.
"""
