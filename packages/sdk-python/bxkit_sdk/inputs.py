"""
Action Inputs
=============

Reads workflow inputs the way the GitHub runner exposes them: as
`INPUT_<NAME>` environment variables.
"""

import os
from typing import List

from bxkit_common import ValidationError
from bxkit_common.constants import INPUT_BOOL_FALSE, INPUT_BOOL_TRUE, EnvVars

from .buildx.attrs import parse_fields


def input_env_name(name: str) -> str:
    """Environment variable holding input `name`."""
    return f"{EnvVars.INPUT_PREFIX}{name.replace(' ', '_').upper()}"


def get_input(name: str) -> str:
    """Trimmed value of input `name`, or "" when unset."""
    return os.environ.get(input_env_name(name), "").strip()


def get_boolean_input(name: str) -> bool:
    """
    Read a boolean input.

    Raises:
        ValidationError: If the value is not one of true/True/TRUE/false/False/FALSE
    """
    value = get_input(name)
    if value in INPUT_BOOL_TRUE:
        return True
    if value in INPUT_BOOL_FALSE:
        return False
    raise ValidationError(
        f'Input does not meet YAML 1.2 "Core Schema" specification: {name}\n'
        f"Support boolean input list: `true | True | TRUE | false | False | FALSE`"
    )


def get_input_list(name: str, ignore_comma: bool = False) -> List[str]:
    """
    Read a list input.

    Entries are separated by newlines and, unless `ignore_comma`, by commas.
    Quoted entries keep their commas. Blank entries are dropped.
    """
    items: List[str] = []
    for line in get_input(name).splitlines():
        if ignore_comma:
            line = line.strip()
            if line:
                items.append(line)
        else:
            items.extend(parse_fields(line))
    return items
