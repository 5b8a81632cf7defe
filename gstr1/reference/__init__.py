"""Static HSN/SAC classification reference data and lookups."""
