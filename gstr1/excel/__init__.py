"""Spreadsheet / delimited-text reading and header resolution."""
