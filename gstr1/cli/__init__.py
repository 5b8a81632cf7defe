"""Command line interface (``python -m gstr1.cli`` / ``gstr1``)."""
