"""Organizational structure audit.

Reads an employee roster, rebuilds the management hierarchy and reports
managers paid outside their salary band and reporting lines that are too long.
"""

__version__ = "0.1.0"
