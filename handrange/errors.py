class RangeSyntaxError(ValueError):
    """Raised by strict parsing when one or more tokens expand to nothing."""

    def __init__(self, tokens: tuple[str, ...]):
        self.tokens = tokens
        super().__init__(f"Unrecognized range tokens: {', '.join(tokens)}")
