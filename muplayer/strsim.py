"""String similarity measures used for fuzzy searching."""

from __future__ import annotations


def jaro_winkler(a: str, b: str) -> float:
    """Jaro-Winkler similarity with an unbounded common prefix, clamped to [0, 1]."""
    jaro_distance = generic_jaro(a, b)

    prefix_length = 0
    for a_char, b_char in zip(a, b):
        if a_char != b_char:
            break
        prefix_length += 1

    score = jaro_distance + 0.08 * prefix_length * (1.0 - jaro_distance)
    return min(max(score, 0.0), 1.0)


def generic_jaro(a: str, b: str) -> float:
    """Jaro similarity between two strings, in the range [0, 1]."""
    a_len = len(a)
    b_len = len(b)

    if a_len == 0 and b_len == 0:
        return 1.0
    if a_len == 0 or b_len == 0:
        return 0.0
    if a_len == 1 and b_len == 1:
        return 1.0 if a == b else 0.0

    search_range = max(a_len, b_len) // 2 - 1

    b_consumed = [False] * b_len
    matches = 0
    transpositions = 0
    b_match_index = 0

    for i, a_char in enumerate(a):
        min_bound = max(0, i - search_range)
        max_bound = min(b_len - 1, i + search_range)
        if min_bound > max_bound:
            continue

        for j in range(min_bound, max_bound + 1):
            if a_char == b[j] and not b_consumed[j]:
                b_consumed[j] = True
                matches += 1
                if j < b_match_index:
                    transpositions += 1
                b_match_index = j
                break

    if matches == 0:
        return 0.0

    return (
        matches / a_len + matches / b_len + (matches - transpositions) / matches
    ) / 3.0