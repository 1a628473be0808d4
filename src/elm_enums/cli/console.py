# topmark:header:start
#
#   project      : elm-enums
#   file         : console.py
#   file_relpath : src/elm_enums/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""User-facing output of elm-enums.

Status lines (``Info: ...``, ``Success: ...`` and the ``-v`` summary) go to
stdout; error lines go to stderr. Internal diagnostics use `logging` instead
(see [`elm_enums.config.logging`][]).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

if TYPE_CHECKING:
    from typing import TextIO


class ClickConsole:
    """Status and error lines for one elm-enums run.

    Args:
        enable_color (bool): Style success lines green and errors red.
        out (TextIO | None): Stream for status lines; ``None`` means the current stdout.
        err (TextIO | None): Stream for error lines; ``None`` means the current stderr.
    """

    def __init__(
        self,
        *,
        enable_color: bool = False,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out
        self.err = err

    def print(self, text: str = "") -> None:
        """Write a plain line to stdout."""
        click.echo(text, file=self.out, color=self.enable_color)

    def info(self, text: str) -> None:
        """Write an ``Info:`` line to stdout."""
        self.print(f"Info: {text}")

    def success(self, text: str) -> None:
        """Write a ``Success:`` line to stdout (green when color is on)."""
        self.print(self.styled(f"Success: {text}", fg="green"))

    def error(self, text: str) -> None:
        """Write an error line to stderr (red when color is on)."""
        click.echo(
            self.styled(text, fg="bright_red"),
            file=self.err,
            err=self.err is None,
            color=self.enable_color,
        )

    def styled(self, text: str, **style: Any) -> str:
        """Return ``text`` styled with `click.style`, or unchanged when color is off."""
        if not self.enable_color:
            return text
        return click.style(text, **style)


def current_console() -> ClickConsole:
    """Return the console of the running ``elm-enums`` command.

    Outside a Click command (the driver used as a library), an uncolored
    console on the process streams is returned.
    """
    ctx = click.get_current_context(silent=True)
    if ctx is not None and isinstance(ctx.obj, dict):
        console = ctx.obj.get("console")
        if isinstance(console, ClickConsole):
            return console
    return ClickConsole()
