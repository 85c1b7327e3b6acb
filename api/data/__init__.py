"""
Structured CRUD over collections (find, count, insert, update, remove).
"""
