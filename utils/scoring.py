"""
Super Bowl squares scoring: map a final score onto the grid.

Each axis is a permutation of the digits 0-9 drawn after the grid fills up.
The winning cell is found by the last digit of each team's score.
"""
from typing import List, Tuple

AXIS_LENGTH = 10


def is_valid_digit(digit) -> bool:
    return isinstance(digit, int) and not isinstance(digit, bool) and 0 <= digit <= 9


def validate_axis(axis: List[int]) -> None:
    """Raise ValueError unless axis holds each digit 0-9 exactly once."""
    if not isinstance(axis, (list, tuple)) or len(axis) != AXIS_LENGTH:
        raise ValueError('Axis must contain exactly 10 digits.')
    for digit in axis:
        if not is_valid_digit(digit):
            raise ValueError('Axis digits must be integers 0-9.')
    if len(set(axis)) != AXIS_LENGTH:
        raise ValueError('Axis digits must be unique (0-9).')


def get_winning_digits(home_score: int, away_score: int) -> Tuple[int, int]:
    return abs(home_score) % 10, abs(away_score) % 10


def get_winning_indexes(home_axis: List[int], away_axis: List[int],
                        home_score: int, away_score: int) -> Tuple[int, int]:
    """
    Translate the winning digits into grid indexes.

    Rows follow the home axis and columns the away axis. For example with
    home_axis = [3, 8, 1, 0, 5, 2, 9, 6, 4, 7] a home score ending in 7
    lands on row 9.
    """
    validate_axis(home_axis)
    validate_axis(away_axis)

    home_digit, away_digit = get_winning_digits(home_score, away_score)
    return list(home_axis).index(home_digit), list(away_axis).index(away_digit)
