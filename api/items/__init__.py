"""
Simple item lookups.
"""
