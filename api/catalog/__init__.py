"""
Schema discovery: MySQL table metadata as platform collection schemas.
"""
