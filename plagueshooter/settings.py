"""Game settings and command-line argument parsing."""

from dataclasses import dataclass


@dataclass
class GameSettings:
    """Options chosen on the command line."""

    colors: bool = False

    def apply_args(self, args):
        """Update settings from a mapping of parsed ``--key`` arguments."""
        if "colors" in args:
            self.colors = True


def _is_key(text):
    return text.startswith("--")


def parse_cmd_args(argv):
    """Map ``--key [value]`` arguments to values; the program name is excluded.

    A key not followed by a value maps to the empty string; other words are ignored.
    """
    args = {}
    for current, following in zip(argv, [*argv[1:], None]):
        if not _is_key(current):
            continue
        key = current[2:]
        args[key] = following if following is not None and not _is_key(following) else ""
    return args