"""
Property tests.

hypothesis-based checks of classification and ordering invariants.
"""
