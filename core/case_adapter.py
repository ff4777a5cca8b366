"""Match the capitalization of an inserted term to what the user typed."""


def adapt_case(original_first_char: str, candidate: str) -> str:
    """Lower-case ``candidate`` when the user typed in lower case.

    Acronym-like terms (second character upper-case, e.g. "DNA") are kept
    as they are.

    Args:
        original_first_char: First character of the text being replaced
        candidate: Term chosen by the user

    Returns:
        Text to insert
    """
    if (
        original_first_char
        and original_first_char != original_first_char.upper()
        and len(candidate) > 1
        and candidate[1] != candidate[1].upper()
    ):
        return candidate.lower()
    return candidate
