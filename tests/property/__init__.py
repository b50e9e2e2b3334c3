"""
Property-based testing suite for valuekit.

Hypothesis picks seeds; the generators under test turn each seed into
values, so failures replay from the reported seed.
"""
