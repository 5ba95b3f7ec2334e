"""Type-safe exception hierarchy and error codes.

Provides structured error handling with:
- Domain-specific exception taxonomy
- Structured error details

Every error here signals a caller programming error. They are raised
synchronously at the offending call and are never retried.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Type-safe error codes."""

    # Validation errors
    INVALID_LENGTH = "invalid_length"
    INVALID_MORPHOLOGICAL_TYPE = "invalid_morphological_type"
    INVALID_FEATURE_TYPE = "invalid_feature_type"
    INVALID_FEATURE_VALUE = "invalid_feature_value"

    # State errors
    FROZEN_ELEMENT = "frozen_element"

    # Morphology errors
    INVALID_MORPH_WORD = "invalid_morph_word"

    # Lexicon errors
    MISSING_LEXICAL_ENTRY = "missing_lexical_entry"
    MISSING_UNDERLYING_FORM = "missing_underlying_form"

    # Resource errors
    SYSTEM_NOT_FOUND = "system_not_found"


class ErrorDetail(BaseModel):
    """Structured error information."""

    code: ErrorCode
    message: str
    field: Optional[str] = None
    context: dict = Field(default_factory=dict)


class OTGenError(Exception):
    """Base exception for all otgen errors.

    Provides structured error information.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        field: Optional[str] = None,
        **context
    ):
        self.code = code
        self.message = message
        self.field = field
        self.context = context
        super().__init__(message)

    def to_detail(self) -> ErrorDetail:
        """Convert to error detail."""
        return ErrorDetail(
            code=self.code,
            message=self.message,
            field=self.field,
            context=self.context
        )


# ═════════════════════════════════════════════════════════════════════════════
# Validation Errors
# ═════════════════════════════════════════════════════════════════════════════

class ValidationError(OTGenError):
    """Invalid argument supplied by the caller."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        field: Optional[str] = None,
        **context
    ):
        super().__init__(
            code=code,
            message=message,
            field=field,
            **context
        )


class InvalidLength(ValidationError):
    """Requested underlying form length is negative."""

    def __init__(self, length: int):
        super().__init__(
            message=f"Underlying form length cannot be negative: {length}",
            code=ErrorCode.INVALID_LENGTH,
            field="length",
            length=length
        )


class InvalidMorphologicalType(ValidationError):
    """Morpheme type is not root, suffix or prefix."""

    def __init__(self, morph_type: object):
        super().__init__(
            message=f"Unrecognized morphological type: {morph_type!r}",
            code=ErrorCode.INVALID_MORPHOLOGICAL_TYPE,
            field="morpheme_type",
            morpheme_type=str(morph_type)
        )


class InvalidFeatureType(ValidationError):
    """Element has no feature of the requested type."""

    def __init__(self, feature_type: object, element: str):
        super().__init__(
            message=f"{element} has no feature of type {feature_type!r}",
            code=ErrorCode.INVALID_FEATURE_TYPE,
            field="feature_type",
            feature_type=str(feature_type),
            element=element
        )


class InvalidFeatureValue(ValidationError):
    """Value is outside the feature's domain and is not UNSET."""

    def __init__(self, feature_type: object, value: object):
        super().__init__(
            message=f"Invalid value for feature {feature_type!r}: {value!r}",
            code=ErrorCode.INVALID_FEATURE_VALUE,
            field="value",
            feature_type=str(feature_type),
            value=str(value)
        )


class FrozenElementError(OTGenError):
    """Feature of an element owned by a finished candidate was reassigned."""

    def __init__(self, feature_type: str):
        super().__init__(
            code=ErrorCode.FROZEN_ELEMENT,
            message=f"Cannot reassign feature {feature_type!r} of a frozen element",
            field="feature_type",
            feature_type=feature_type
        )


# ═════════════════════════════════════════════════════════════════════════════
# Morphology & Lexicon Errors
# ═════════════════════════════════════════════════════════════════════════════

class MorphologyError(OTGenError):
    """Morphological word composition rule violated."""

    def __init__(self, reason: str, **context):
        super().__init__(
            code=ErrorCode.INVALID_MORPH_WORD,
            message=f"Invalid morphological word: {reason}",
            reason=reason,
            **context
        )


class LexiconError(OTGenError):
    """Lexicon cannot supply an underlying form for a morpheme."""

    def __init__(
        self,
        morpheme: str,
        reason: str,
        code: ErrorCode = ErrorCode.MISSING_LEXICAL_ENTRY
    ):
        super().__init__(
            code=code,
            message=f"Morpheme {morpheme}: {reason}",
            field="morpheme",
            morpheme=morpheme,
            reason=reason
        )


# ═════════════════════════════════════════════════════════════════════════════
# Resource Errors
# ═════════════════════════════════════════════════════════════════════════════

class UnknownSystemError(OTGenError):
    """Requested linguistic system is not registered."""

    def __init__(self, name: str, known: list[str]):
        super().__init__(
            code=ErrorCode.SYSTEM_NOT_FOUND,
            message=f"Unknown linguistic system: {name}",
            field="name",
            name=name,
            known=known
        )
