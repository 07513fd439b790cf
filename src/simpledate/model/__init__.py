"""Date values, sub-fields, and parsing helpers."""
