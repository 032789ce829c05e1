class SearchError(Exception):
    """Base class for every failure that ends a search run."""

    key = "error"
    exit_code = 1

    def __init__(self, message="", **details):
        super().__init__(message)
        self.details = details


class InputReadError(SearchError):
    key = "input_read_error"


class OutputWriteError(SearchError):
    key = "output_write_error"


class ValidationError(SearchError):
    """Raised when user input is rejected before the matcher runs."""

    key = "validation_error"
    exit_code = 2


class EmptyPatternError(ValidationError):
    key = "empty_pattern"


class NonPrintablePatternError(ValidationError):
    key = "non_printable_pattern"


class InvalidRadiusError(ValidationError):
    key = "invalid_radius"


class InvalidHashParametersError(ValidationError):
    key = "invalid_hash_parameters"


class InvalidConfigurationError(ValidationError):
    key = "invalid_configuration"
