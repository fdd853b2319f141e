"""
Nvag: chord reference list, served from its own database.
"""
