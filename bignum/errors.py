class FormatError(ValueError):
    """Raised when text is not a decimal integer with an optional sign."""

    def __init__(self, text: str) -> None:
        self.text = text
        t_text = text
        if len(t_text) > 100:
            t_text = t_text[:100] + '...'
        super().__init__(f"Could not create BigInt from string: non-integer value {t_text!r}")
