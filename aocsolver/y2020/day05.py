"""Binary boarding: decode seat ids."""


def seat_position(codes, length):
    """Binary-partition 0..length-1 by F/L (lower) and B/R (upper) codes."""
    left, right = 0, length - 1
    for code in codes:
        if code in "FL":
            right = (right - left) // 2 + left
        elif code in "BR":
            left = (right - left + 1) // 2 + left
    return left


def seat_id(boarding_pass):
    """Return row * 8 + column for a boarding pass."""
    row = seat_position(boarding_pass[:7], 128)
    column = seat_position(boarding_pass[7:], 8)
    return row * 8 + column


def _seat_ids(text):
    ids = [seat_id(line) for line in text.splitlines()]
    if not ids:
        raise ValueError("input holds no boarding passes")
    return ids


def solve_part_1(text):
    """Highest seat id."""
    return max(_seat_ids(text))


def solve_part_2(text):
    """The missing seat id whose neighbours exist, away from the first and last rows.

    Returns 0 when no such seat is found.
    """
    ids = sorted(_seat_ids(text))
    my_id = 0
    for prev_id, curr_id in zip(ids, ids[1:]):
        if curr_id - prev_id == 2:
            candidate = prev_id + 1
            if candidate // 8 not in (0, 127):
                my_id = candidate
    return my_id