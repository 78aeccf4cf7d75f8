"""Custom exception hierarchy for the ECG rhythm demo."""


class ECGSystemError(Exception):
    """Base exception for all ECG system errors."""


class InvalidParameterError(ECGSystemError):
    """Raised when a synthesis or analysis parameter is out of range."""

    def __init__(self, name: str, value: object, detail: str) -> None:
        self.name = name
        self.value = value
        self.detail = detail
        super().__init__(f"Invalid value for '{name}' ({value!r}): {detail}")


class UnknownPatternError(ECGSystemError):
    """Raised when a selector string does not name a rhythm pattern."""

    def __init__(self, selector: str, valid: list[str]) -> None:
        self.selector = selector
        self.valid = valid
        super().__init__(
            f"Unknown rhythm pattern '{selector}'. Valid: {', '.join(valid)}"
        )


class ConfigError(ECGSystemError):
    """Raised when a YAML config file cannot be interpreted."""
