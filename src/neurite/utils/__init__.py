from neurite.utils.validation import validate_positive, validate_within_range

__all__ = ["validate_positive", "validate_within_range"]
