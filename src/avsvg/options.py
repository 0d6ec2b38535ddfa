"""Options controlling how values are written back to text."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from avsvg.common import ListSeparator

###############################################################################
# WriteOptions
###############################################################################


@dataclass(frozen=True)
class WriteOptions:
    """Options for writing SVG values. All flags are independent and off by default.

    Attributes:
        trim_hex_colors: Use ``#RGB`` color notation when possible (``#ff0000`` -> ``#f00``).
        remove_leading_zero: Remove the leading zero of numbers (``0.1`` -> ``.1``, ``-0.1`` -> ``-.1``).
        use_compact_path_notation: Drop every separator the path grammar does not need
            (``M 10 -20 A 5.5 0.3 -4 1 1 0 -0.1`` -> ``M10-20A5.5 0.3-4 1 1 0-0.1``).
        join_arc_to_flags: Write the two arc flags without a separator
            (``A 5 5 30 1 1 10 10`` -> ``A 5 5 30 1110 10``).
            Valid path data, but many viewers do not support it.
        remove_duplicated_path_commands: Skip a command letter equal to the previous one
            (``M 10 10 L 20 20 L 30 30`` -> ``M 10 10 L 20 20 30 30``).
        use_implicit_lineto_commands: Skip the LineTo letter after a MoveTo
            (``M 10 10 L 20 20 L 30 30`` -> ``M 10 10 20 20 30 30``).
        simplify_transform_matrices: Write transform matrices in their short form
            (``matrix(1 0 0 1 10 20)`` -> ``translate(10 20)``).
        list_separator: Separator between the items of list values.
    """

    trim_hex_colors: bool = False
    remove_leading_zero: bool = False
    use_compact_path_notation: bool = False
    join_arc_to_flags: bool = False
    remove_duplicated_path_commands: bool = False
    use_implicit_lineto_commands: bool = False
    simplify_transform_matrices: bool = False
    list_separator: ListSeparator = ListSeparator.SPACE

    @property
    def separator(self) -> str:
        """Text of the configured list separator."""
        return self.list_separator.value

    def replace(self, **changes: Any) -> WriteOptions:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict:
        """Convert options to a dictionary for serialization."""
        return {
            "trim_hex_colors": self.trim_hex_colors,
            "remove_leading_zero": self.remove_leading_zero,
            "use_compact_path_notation": self.use_compact_path_notation,
            "join_arc_to_flags": self.join_arc_to_flags,
            "remove_duplicated_path_commands": self.remove_duplicated_path_commands,
            "use_implicit_lineto_commands": self.use_implicit_lineto_commands,
            "simplify_transform_matrices": self.simplify_transform_matrices,
            "list_separator": self.list_separator.name,
        }

    @classmethod
    def from_dict(cls, data: dict) -> WriteOptions:
        """Create WriteOptions from a dictionary. Missing keys keep their defaults.

        ``list_separator`` may be given as a ``ListSeparator``, its name
        (``"COMMA_SPACE"``) or its text (``", "``).
        """
        separator = data.get("list_separator", ListSeparator.SPACE)
        if not isinstance(separator, ListSeparator):
            if separator in ListSeparator.__members__:
                separator = ListSeparator[separator]
            else:
                separator = ListSeparator(separator)

        return cls(
            trim_hex_colors=data.get("trim_hex_colors", False),
            remove_leading_zero=data.get("remove_leading_zero", False),
            use_compact_path_notation=data.get("use_compact_path_notation", False),
            join_arc_to_flags=data.get("join_arc_to_flags", False),
            remove_duplicated_path_commands=data.get("remove_duplicated_path_commands", False),
            use_implicit_lineto_commands=data.get("use_implicit_lineto_commands", False),
            simplify_transform_matrices=data.get("simplify_transform_matrices", False),
            list_separator=separator,
        )


# Option presets
DEFAULT_WRITE_OPTIONS = WriteOptions()

COMPACT_WRITE_OPTIONS = WriteOptions(
    remove_leading_zero=True,
    use_compact_path_notation=True,
)

MINIFIED_WRITE_OPTIONS = WriteOptions(
    trim_hex_colors=True,
    remove_leading_zero=True,
    use_compact_path_notation=True,
    join_arc_to_flags=True,
    remove_duplicated_path_commands=True,
    use_implicit_lineto_commands=True,
    simplify_transform_matrices=True,
)
