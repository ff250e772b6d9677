import os

TRUE_FLAG_VALUES = {"true", "1", "yes", "on"}
FALSE_FLAG_VALUES = {"false", "0", "no", "off", ""}


def _env_flag(env_var: str, *, default: bool = False) -> bool:
    """Return the boolean value of ``env_var``, rejecting unrecognised strings."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in TRUE_FLAG_VALUES:
        return True
    if normalized in FALSE_FLAG_VALUES:
        return False
    raise ValueError(f"{env_var} must be a boolean flag, got {value!r}")


def _env_int(env_var: str, *, default: int, minimum: int | None = None) -> int:
    """Return the integer value of ``env_var`` with optional bounds checking."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be an integer") from exc
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    return parsed


def _env_float(
    env_var: str,
    *,
    default: float,
    minimum: float | None = None,
    maximum: float | None = None,
    positive: bool = False,
) -> float:
    """Return the float value of ``env_var`` with optional bounds checking.

    ``positive`` rejects zero as well as negative values, which ``minimum``
    alone cannot express.
    """

    value = os.environ.get(env_var)
    if value is None:
        return default
    try:
        parsed = float(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be a float") from exc
    if positive and not parsed > 0:
        raise ValueError(f"{env_var} must be greater than 0")
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    if maximum is not None and parsed > maximum:
        raise ValueError(f"{env_var} must be at most {maximum}")
    return parsed
