"""Attendance Core package.

Security and reporting core for weekend-class attendance: signed check-in
tokens, admin session tokens, and pure aggregation over attendance rows.
Persistence, rendering and routing live in the calling application.
"""
