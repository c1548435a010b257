"""gameid — game account identifier validation and normalization."""

from gameid.domain.validator import ValidationResult, validate

__version__ = "0.1.0"

__all__ = ["ValidationResult", "__version__", "validate"]
