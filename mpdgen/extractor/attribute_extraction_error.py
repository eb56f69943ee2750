from enum import Enum


class AttributeErrorReason(str, Enum):
    NOT_FOUND = "not_found"
    AMBIGUOUS = "ambiguous"
    EMPTY = "empty"


class AttributeExtractionError(Exception):
    def __init__(self, attribute: str, reason: AttributeErrorReason, matches_count: int):
        super().__init__(f"Attribute '{attribute}' extraction failed: {reason.value} ({matches_count} match(es))")
        self.attribute: str = attribute
        self.reason: AttributeErrorReason = reason
        self.matches_count: int = matches_count


class AttributeNotFoundError(AttributeExtractionError):
    def __init__(self, attribute: str):
        super().__init__(attribute, AttributeErrorReason.NOT_FOUND, 0)


class AttributeAmbiguousError(AttributeExtractionError):
    def __init__(self, attribute: str, matches_count: int):
        super().__init__(attribute, AttributeErrorReason.AMBIGUOUS, matches_count)


class AttributeEmptyError(AttributeExtractionError):
    def __init__(self, attribute: str):
        super().__init__(attribute, AttributeErrorReason.EMPTY, 1)
