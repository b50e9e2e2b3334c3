"""
Utilities package: constants, validators and console output helpers.
"""
