"""Passport processing: required fields and field validation."""

import re

REQUIRED_FIELDS = frozenset({"byr", "iyr", "eyr", "hgt", "hcl", "ecl", "pid"})
_HCL_LETTERS = frozenset("abcdef")
_ECL_VALUES = frozenset({"amb", "blu", "brn", "gry", "grn", "hzl", "oth"})
_NUMBER = re.compile(r"\+?[0-9]+")


def _number(value):
    if not _NUMBER.fullmatch(value):
        raise ValueError(f"not a non-negative integer: {value!r}")
    return int(value)


def parse_passport(text):
    """Turn whitespace separated 'key:value' fields into a dict."""
    properties = {}
    for field in text.split():
        parts = field.split(":")
        if len(parts) < 2:
            raise ValueError(f"malformed field: {field!r}")
        properties[parts[0]] = parts[1]
    return properties


def has_all_required_fields(fields):
    """Return True when every required field name is present."""
    return REQUIRED_FIELDS <= set(fields)


def _is_byr_valid(value):
    return 1920 <= _number(value) <= 2002


def _is_iyr_valid(value):
    return 2010 <= _number(value) <= 2020


def _is_eyr_valid(value):
    return 2020 <= _number(value) <= 2030


def is_hgt_valid(value):
    """Height in cm (150-193) or in (59-76)."""
    number = int("".join(c for c in value if c.isnumeric()))
    unit = "".join(c for c in value if c.isalpha())
    if unit == "cm":
        return 150 <= number <= 193
    if unit == "in":
        return 59 <= number <= 76
    return False


def is_hcl_valid(value):
    """'#' followed by six characters that are digits or a-f."""
    if not value:
        raise ValueError("hair colour is empty")
    if value[0] != "#":
        return False
    return sum(1 for c in value[1:] if c.isnumeric() or c in _HCL_LETTERS) == 6


def _is_ecl_valid(value):
    return value in _ECL_VALUES


def _is_pid_valid(value):
    return sum(1 for c in value if c.isnumeric()) == 9


_VALIDATORS = (
    ("byr", _is_byr_valid),
    ("iyr", _is_iyr_valid),
    ("eyr", _is_eyr_valid),
    ("hgt", is_hgt_valid),
    ("hcl", is_hcl_valid),
    ("ecl", _is_ecl_valid),
    ("pid", _is_pid_valid),
)


def is_passport_valid(properties):
    """Return True when all required fields are present and valid."""
    return has_all_required_fields(properties) and all(
        check(properties[field]) for field, check in _VALIDATORS
    )


def _passports(text):
    return (parse_passport(chunk) for chunk in text.split("\n\n"))


def solve_part_1(text):
    """Count passports holding every required field."""
    return sum(1 for passport in _passports(text) if has_all_required_fields(passport))


def solve_part_2(text):
    """Count passports whose required fields are all valid."""
    return sum(1 for passport in _passports(text) if is_passport_valid(passport))