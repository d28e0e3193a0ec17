"""
Property Tests

Hypothesis tests for shuffle permutations, parse round trips and draw ranges.
"""
