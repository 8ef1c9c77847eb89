"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class SourceError(DomainError):
    """Base class for malformed display sources.

    These are precondition violations raised while a source is being built,
    never while it is being resolved.
    """


# ============================================================================
#                        Image / text source errors
# ============================================================================


class InvalidImageSourceError(SourceError):
    """Raised when an image source's payload does not match its kind."""

    def __init__(self, kind: str, reason: str) -> None:
        super().__init__(f"Invalid {kind} image source: {reason}")
        self.kind = kind
        self.reason = reason


class InvalidTextSourceError(SourceError):
    """Raised when a text source's payload does not match its kind."""

    def __init__(self, kind: str, reason: str) -> None:
        super().__init__(f"Invalid {kind} text source: {reason}")
        self.kind = kind
        self.reason = reason


class UnsupportedSourceTypeError(SourceError):
    """Raised when a raw value cannot be coerced into a display source."""

    def __init__(self, target: str, value: object) -> None:
        super().__init__(
            f"Cannot build {target} source from value of type "
            f"'{type(value).__name__}'."
        )
        self.target = target
        self.value_type = type(value)


# ============================================================================
#                           Styled text errors
# ============================================================================


class InvalidStyleRangeError(SourceError):
    """Raised when a style range does not fit the text it annotates."""

    def __init__(self, start: int, end: int, length: int | None = None) -> None:
        if length is None:
            message = f"Style range [{start}, {end}) is malformed."
        else:
            message = (
                f"Style range [{start}, {end}) is out of bounds for text of "
                f"length {length}."
            )
        super().__init__(message)
        self.start = start
        self.end = end
        self.length = length
