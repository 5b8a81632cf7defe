"""GSTR-1 return builder.

Turns loosely structured invoice spreadsheets into a GSTR-1 return JSON.
"""

__version__ = "0.1.0"
