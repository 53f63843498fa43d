class StyleValueError(ValueError):
    """Raised by a strict style when a setter rejects its value."""

    def __init__(self, key: str, value, reason: str = "invalid value"):
        self.key = key
        self.value = value
        super().__init__(f'{reason} for style key "{key}": {value!r}')
