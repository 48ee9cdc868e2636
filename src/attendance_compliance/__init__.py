"""Attendance Compliance package.

This package is organized by feature modules (schedules, attendance, overtime,
reports, ...) with pure analysis functions at the bottom and a thin Flask
controller layer on top.
"""
