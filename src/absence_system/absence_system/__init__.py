"""Absence System package.

Feature modules (absences, reports) keep the pure classification, filtering
and consolidation logic apart from the Flask controllers and the MySQL
repository layer.
"""
