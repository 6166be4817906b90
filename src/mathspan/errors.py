"""Exception classes for mathspan.

The scanning, locating and mutation functions are total and never raise.
Exceptions are reserved for misuse that can be caught at configuration time.
"""

from __future__ import annotations


class MathSpanError(Exception):
    """Base exception for all mathspan errors.
    
    Subclass this for specific error categories.
    """

    pass


class ConfigError(MathSpanError):
    """Error in engine configuration.
    
    Raised when a MathConfig field holds a value the scanner or
    mutation operators cannot work with (e.g., a multi-character delimiter).
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.
        
        Args:
            field: Name of the offending MathConfig field
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"Config field '{field}': {message}")
