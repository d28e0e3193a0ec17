"""
simple_cards test suite.

Test Structure:
    unit/: one module per component
    property/: hypothesis property tests
"""
