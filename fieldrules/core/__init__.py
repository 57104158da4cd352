"""
Core of the field validation engine: models, validators and rules.
"""
