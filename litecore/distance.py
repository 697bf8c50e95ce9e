"""
Edit distance between command names.

Used by the router to suggest the closest command when the user types
something unknown.
"""

from typing import List


def levenshtein(a: str, b: str) -> int:
    """
    Compute the Levenshtein distance between two strings.

    Counts the minimum number of single-character insertions, deletions and
    substitutions needed to turn ``a`` into ``b``.

    Args:
        a: First string.
        b: Second string.

    Returns:
        Edit distance (0 when the strings are equal).

    Example:
        levenshtein("exit", "exot")   # 1
        levenshtein("hello", "bye")   # 5
    """
    m, n = len(a), len(b)
    if m == 0:
        return n
    if n == 0:
        return m

    dp: List[List[int]] = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        row = dp[i]
        prev_row = dp[i - 1]
        for j in range(1, n + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            row[j] = min(
                prev_row[j] + 1,  # deletion
                row[j - 1] + 1,  # insertion
                prev_row[j - 1] + cost,  # substitution
            )

    return dp[m][n]
