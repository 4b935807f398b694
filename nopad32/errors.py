class AbsentArgumentError(TypeError):
    def __init__(self, name: str) -> None:
        super().__init__(f"{name} must not be None")
        self.name = name


class Base32Error(ValueError):
    pass


class InvalidLengthError(Base32Error):
    def __init__(self, length: int, byte_count: int) -> None:
        super().__init__(
            f"Invalid base32 length: {length}. "
            f"1 less character is enough to encode the same number of bytes ({byte_count})."
        )
        self.length = length
        self.byte_count = byte_count


class InvalidCharacterError(Base32Error):
    def __init__(self, character: str, position: int) -> None:
        super().__init__(f"'{character}' is not a valid base32 character (position {position})")
        self.character = character
        self.position = position


def ensure_not_none(value, name: str) -> None:
    if value is None:
        raise AbsentArgumentError(name)
