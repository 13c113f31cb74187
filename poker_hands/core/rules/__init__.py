"""
Rules module.

Shared result type for validation steps.
"""

from .result import OperationResult

__all__ = ['OperationResult']
