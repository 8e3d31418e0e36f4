"""Guard conditions."""


def supplied_values_are_not_empty(**values: str | None) -> None:
    """Raise a ValueError if any supplied value is an empty string.

    A value of None means "not supplied" and is always accepted.

    Args:
        **values (str | None): The values to check, keyed by the option name they came from.

    """
    for name, v in values.items():
        if v == "":
            raise ValueError(f"--{name} was given an empty value.")
