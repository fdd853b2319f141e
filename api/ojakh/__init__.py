"""
Ojakh: recipe catalog with normalized ingredients.
"""
