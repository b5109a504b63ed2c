"""
API boundary: conversions between domain values and wire records.
"""
