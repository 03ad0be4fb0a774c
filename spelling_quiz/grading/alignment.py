from __future__ import annotations


def edit_distance(a: str, b: str) -> int:
    if a == b:
        return 0

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            deletions = previous[j] + 1
            insertions = current[j - 1] + 1
            substitutions = previous[j - 1] + (char_a != char_b)
            current.append(min(deletions, insertions, substitutions))
        previous = current
    return previous[-1]


def distance_table(a: str, b: str) -> list[list[int]]:
    m, n = len(a), len(b)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,
                dp[i][j - 1] + 1,
                dp[i - 1][j - 1] + cost,
            )
    return dp


def mismatch_marks(a: str, b: str) -> list[bool]:
    """Walk one minimal alignment of ``a`` onto ``b`` and flag the characters of ``a`` it blames.

    Among equally cheap paths the walk prefers, in order: a diagonal match,
    a diagonal substitution, a deletion from ``a``, an insertion into ``a``.
    That order decides which characters get highlighted, so keep it stable.
    """
    dp = distance_table(a, b)
    i, j = len(a), len(b)
    marks = [False] * len(a)

    while i > 0 or j > 0:
        if i > 0 and j > 0 and a[i - 1] == b[j - 1] and dp[i][j] == dp[i - 1][j - 1]:
            i -= 1
            j -= 1
        elif i > 0 and j > 0 and dp[i][j] == dp[i - 1][j - 1] + 1:
            marks[i - 1] = True
            i -= 1
            j -= 1
        elif i > 0 and dp[i][j] == dp[i - 1][j] + 1:
            marks[i - 1] = True
            i -= 1
        else:
            j -= 1
    return marks
