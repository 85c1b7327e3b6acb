"""
Raw SQL endpoints guarded by a keyword denylist.
"""
