"""
Misspelling detection for "did you mean" suggestions.

The heuristic never changes what parses, only what an unknown-argument
message proposes.

- distance(a, b): optimal string alignment distance (Damerau-Levenshtein where
  each substring is edited at most once), so "--outptu" is one step from
  "--output".
- ismisspelled(candidate, name): True when candidate is a plausible typo of name.
- suggest(words): render suggestions as "'a' or 'b'" for messages.
"""
import functools


@functools.lru_cache(maxsize=1024)
def distance(source, target, /):
    """
    Return the optimal string alignment distance between two strings.

    Insertions, deletions, substitutions and adjacent transpositions cost one.
    """
    if not isinstance(source, str) or not isinstance(target, str):
        raise TypeError("distance() arguments must be strings")

    rows, columns = len(source) + 1, len(target) + 1
    matrix = [[0] * columns for _ in range(rows)]
    for row in range(rows):
        matrix[row][0] = row
    for column in range(columns):
        matrix[0][column] = column

    for row in range(1, rows):
        for column in range(1, columns):
            cost = source[row - 1] != target[column - 1]
            matrix[row][column] = min(
                matrix[row - 1][column] + 1,         # deletion
                matrix[row][column - 1] + 1,         # insertion
                matrix[row - 1][column - 1] + cost,  # substitution
            )
            if (
                row > 1 and column > 1 and
                source[row - 1] == target[column - 2] and
                source[row - 2] == target[column - 1]
            ):
                matrix[row][column] = min(matrix[row][column], matrix[row - 2][column - 2] + 1)

    return matrix[-1][-1]


def _significant(word):
    # Dashes are shape, not spelling.
    return word.lstrip("-")


def ismisspelled(candidate, name, /):
    """
    Return True when candidate looks like a misspelling of name.

    A one-character name (such as "-v") only matches the same character in
    another case ("-V"). Otherwise a candidate qualifies when it differs from
    name and any of these hold:
    - the edit distance is at most 1 for short names (three significant
      characters or fewer) or at most 2 otherwise;
    - it uses exactly the same characters in another order;
    - its significant part is a prefix (three characters or more) of name's.
    """
    if not candidate or not name or candidate == name:
        return False

    significant = _significant(name)
    stem = _significant(candidate)
    # Any two one-character names are one edit apart; only a case slip counts.
    if len(significant) == 1:
        return stem.lower() == significant.lower()
    threshold = 1 if len(significant) <= 3 else 2

    if distance(candidate, name) <= threshold:
        return True
    if sorted(candidate) == sorted(name):
        return True

    return len(stem) >= 3 and significant.startswith(stem)


def suggest(words, /):
    """
    Join suggestions for display: "'--output' or '--outdir'".
    """
    return " or ".join(map(repr, words))


__all__ = (
    "distance",
    "ismisspelled",
    "suggest",
)
