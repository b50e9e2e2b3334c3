"""
Test package for valuekit.

Unit tests for value objects and generators, Hypothesis property tests for
the generation laws, and end-to-end CLI tests.
"""
