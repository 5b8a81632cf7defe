"""Pipeline services: normalisation, validation, grouping, export."""
