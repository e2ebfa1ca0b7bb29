from enum import Enum


class ErrorKind(Enum):
    INVALID_INPUT = "invalid_input"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    MALFORMED_RESPONSE = "malformed_response"
    NOT_FOUND = "not_found"

    @property
    def is_failure(self) -> bool:
        # NOT_FOUND is a valid empty result, not a fault
        return self is not ErrorKind.NOT_FOUND

    def __str__(self):
        return self.value
