"""
Interactive input for session fields that were not given on the command line.
"""
from typing import Callable, Dict, Any


PROMPTS = {
    'user_name': "Enter your GitHub username: ",
    'user_email': "Enter your email: ",
    'intensity': "Enter contribution probability (0-1): ",
}


class IntensityParseError(ValueError):
    """Raised when the intensity can't be read as a number."""
    pass


def parse_intensity(raw: str) -> float:
    """
    Parse an intensity value.

    No bounds check: values above 1 mean every day is active, values at or
    below 0 mean no day is.
    """
    text = str(raw).strip()
    try:
        value = float(text)
    except ValueError:
        raise IntensityParseError(f"Intensity must be a number, got {text!r}")

    if value != value:
        raise IntensityParseError(f"Intensity must be a number, got {text!r}")

    return value


def prompt_missing(
    values: Dict[str, Any],
    fields: list,
    input_fn: Callable[[str], str] = input
) -> Dict[str, Any]:
    """
    Ask for each missing field in order and return the completed values.

    Args:
        values: Session values collected so far
        fields: Field names to prompt for
        input_fn: Prompt function (default: builtin input)

    Returns:
        New dict with prompted values filled in

    Raises:
        IntensityParseError: If the intensity answer isn't numeric
    """
    completed = dict(values)

    for name in fields:
        answer = input_fn(PROMPTS[name]).strip()
        if name == 'intensity':
            completed[name] = parse_intensity(answer)
        else:
            completed[name] = answer

    return completed
