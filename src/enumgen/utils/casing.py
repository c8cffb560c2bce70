"""Identifier case transforms used to normalize enum names and values."""


def to_title_case(word: str) -> str:
    """Upper-case the first character of a word and lower-case the rest.

    Args:
        word: The word to transform. May be empty.

    Returns:
        The title-cased word, e.g. "PENDING" -> "Pending".
    """
    return word[:1].upper() + word[1:].lower()


def to_pascal_case(snake: str) -> str:
    """Convert a snake_case string to PascalCase.

    Empty segments (leading, trailing or doubled underscores) contribute
    nothing to the result.

    Args:
        snake: A snake_case string such as "in_progress".

    Returns:
        The PascalCase form, e.g. "InProgress".

    Example:
        >>> to_pascal_case("not_started")
        'NotStarted'
        >>> to_pascal_case("PENDING")
        'Pending'
    """
    return "".join(to_title_case(segment) for segment in snake.split("_"))


def to_snake_case(name: str) -> str:
    """Convert a PascalCase or camelCase identifier to snake_case.

    Every uppercase character after the first gets its own separator, so
    acronyms are split one letter per segment ("HTTPCode" -> "h_t_t_p_code").

    Args:
        name: The identifier to convert.

    Returns:
        The snake_case form, e.g. "InProgress" -> "in_progress".
    """
    chars = []
    for index, char in enumerate(name):
        if index > 0 and char.isupper():
            chars.append("_")
        chars.append(char)
    return "".join(chars).lower()
