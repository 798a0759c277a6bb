"""Configurable themes for ordinal_menu rendering.

The Theme dataclass holds every visual element the renderer uses
(colors, glyphs, hint text). Colors use Rich markup names.
"""

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for the ordinal prompt.

    Attributes:
        question_color: Color for the leading question mark.
        selected_color: Color for the cursor line.
        ordinal_color: Color for the selection-order number.
        answer_color: Color for the final answer summary.
        key_color: Color for key names in the hint line.
        dim_color: Color for separators and disabled choices.
        error_color: Color for the validation error prefix.

        question_icon: Character printed before the message.
        cursor_icon: Character shown next to the pointed choice.
        unchecked_icon: Marker for choices not yet selected.
        separator_line: Default text for separators.
        error_icon: Prefix of the validation error line.
        scroll_up_icon: Character indicating more lines above.
        scroll_down_icon: Character indicating more lines below.

        disabled_reason: Annotation for choices disabled without a reason.
        invalid_message: Error shown when a validator returns False.
    """

    # Colors
    question_color: str = "green"
    selected_color: str = "cyan"
    ordinal_color: str = "green"
    answer_color: str = "cyan"
    key_color: str = "bold cyan"
    dim_color: str = "dim"
    error_color: str = "red"

    # Icons
    question_icon: str = "?"
    cursor_icon: str = "❯"
    unchecked_icon: str = "◯"
    separator_line: str = "─" * 15
    error_icon: str = ">>"
    scroll_up_icon: str = "↑"
    scroll_down_icon: str = "↓"

    disabled_reason: str = "Disabled"
    invalid_message: str = "Invalid selection"


# Default theme used when none is specified
DEFAULT_THEME = Theme()
