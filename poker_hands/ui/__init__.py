"""Poker hands user interfaces."""
