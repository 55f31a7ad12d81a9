class MalformedResponseError(ValueError):
    """The tagger answered, but the body cannot be read as a token list."""
