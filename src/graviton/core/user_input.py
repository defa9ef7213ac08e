"""Parsing of what the user typed into the address box.

The text is treated as a command line: a few launcher flags may come first,
then the package name (a coordinate or a domain name), then arguments for the
launched program. Forcing a re-download is as easy as typing
``--clear-cache com.example:app``.
"""

import shlex
from dataclasses import dataclass, field

from ..errors import UserInputError

_FLAGS = {
    "--clear-cache": "clear_cache",
    "--offline": "offline",
    "--refresh": "refresh",
    "-r": "refresh",
    "--verbose": "verbose",
    "-v": "verbose",
}


@dataclass(frozen=True)
class UserInput:
    """Structured form of one line of user input."""

    package_name: str
    args: tuple[str, ...] = ()
    clear_cache: bool = False
    offline: bool = False
    refresh: bool = False
    verbose: bool = False
    flags: frozenset[str] = field(default_factory=frozenset)


def parse_user_input(text: str) -> UserInput:
    """Parse raw user input into flags, package name and program arguments.

    Args:
        text: Exactly what the user typed.

    Returns:
        Parsed input.

    Raises:
        UserInputError: On unbalanced quotes, an unknown flag before the
            package name, or when no package name is present.
    """
    try:
        tokens = shlex.split(text)
    except ValueError as e:
        raise UserInputError(f"Cannot parse {text!r}: {e}") from e

    options: dict[str, bool] = {}
    for i, token in enumerate(tokens):
        if token.startswith("-"):
            name = _FLAGS.get(token)
            if name is None:
                raise UserInputError(f"Unknown option {token!r} in {text!r}")
            options[name] = True
            continue
        return UserInput(
            package_name=token,
            args=tuple(tokens[i + 1 :]),
            flags=frozenset(t for t in tokens[:i]),
            **options,
        )

    raise UserInputError(f"No package name in {text!r}")
