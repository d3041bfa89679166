"""Core enums package.

Usage:
    from directory_gate.core.enums import ErrorCode, Environment
"""

from directory_gate.core.enums.environment import Environment
from directory_gate.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
