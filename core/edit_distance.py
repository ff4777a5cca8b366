"""Edit distance used to rank term suggestions."""


def levenshtein_distance(first: str, second: str) -> int:
    """Compute the Levenshtein distance between two strings.

    Args:
        first: Source string
        second: Target string

    Returns:
        Minimum number of single-character insertions, deletions or
        substitutions needed to turn ``first`` into ``second``
    """
    if not first or not second:
        return abs(len(first) - len(second))

    # matrix[i][j] = distance between second[:i] and first[:j]
    matrix = [[i] + [0] * len(first) for i in range(len(second) + 1)]
    for j in range(len(first) + 1):
        matrix[0][j] = j

    for i in range(1, len(second) + 1):
        for j in range(1, len(first) + 1):
            if second[i - 1] == first[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = 1 + min(
                    matrix[i - 1][j - 1],  # substitution
                    matrix[i][j - 1],      # insertion
                    matrix[i - 1][j],      # deletion
                )

    return matrix[len(second)][len(first)]
