"""
Tasks: the original single-table CRUD example, kept on the ojakh database.
"""
