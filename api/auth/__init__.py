"""
Shared-secret access gate.
"""
