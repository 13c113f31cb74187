"""
Poker hands test suite.
"""
