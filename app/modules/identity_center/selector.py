"""Interactive single-choice selection.

`InteractiveSelector` asks the user to pick one entry of a listing and
returns the chosen id, or `CANCELLED` when the listing is empty or the
prompt is dismissed. The prompt itself is pluggable:

- `FzfPrompt` pipes the listing through the `fzf` fuzzy finder.
- `NumberedPrompt` prints a numbered rich table and reads a choice.

`default_prompt()` picks fzf when it is installed.
"""

import shutil
import subprocess
from typing import Callable, Optional, Protocol, Sequence, Tuple, Union

from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from infrastructure.logging import get_module_logger
from modules.identity_center.domain.errors import IdentityCenterError
from modules.identity_center.domain.models import CANCELLED, Cancelled

logger = get_module_logger()

Option = Tuple[str, str]

# fzf exits 1 when nothing matched and 130 when interrupted with Esc/Ctrl-C
FZF_DISMISSED_CODES = (1, 130)


class SelectionPrompt(Protocol):
    def choose(self, options: Sequence[Option]) -> Optional[str]:
        """Return the chosen id, or None when the user dismissed the prompt."""
        ...


class FzfPrompt:
    """Selection through the fzf fuzzy finder."""

    def __init__(
        self,
        executable: str = "fzf",
        prompt: str = "Select group: ",
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ) -> None:
        self.executable = executable
        self.prompt = prompt
        self._runner = runner

    def choose(self, options: Sequence[Option]) -> Optional[str]:
        lines = "\n".join(f"{option_id}\t{label}" for option_id, label in options)
        command = [
            self.executable,
            "--height=50%",
            "--layout=reverse",
            "--border",
            "--delimiter=\t",
            "--with-nth=2..",
            f"--prompt={self.prompt}",
            "--preview-window=right:50%:wrap",
            "--preview=echo 'Group ID: {1}'; echo 'Name: {2..}'",
            "--header=Up/Down to move, Enter to select, Esc to cancel",
        ]
        try:
            completed = self._runner(
                command, input=lines, stdout=subprocess.PIPE, text=True, check=False
            )
        except OSError as exc:
            raise IdentityCenterError(f"Failed to start fzf: {exc}") from exc

        if completed.returncode in FZF_DISMISSED_CODES:
            return None
        if completed.returncode != 0:
            raise IdentityCenterError(
                f"fzf exited with status {completed.returncode}"
            )

        selected = (completed.stdout or "").strip()
        if not selected:
            return None
        return selected.split("\t", 1)[0].strip() or None


class NumberedPrompt:
    """Selection from a numbered list, for terminals without fzf."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(stderr=True)

    def choose(self, options: Sequence[Option]) -> Optional[str]:
        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("#", justify="right")
        table.add_column("DisplayName")
        table.add_column("GroupId", style="dim")
        for number, (option_id, label) in enumerate(options, start=1):
            table.add_row(str(number), label, option_id)
        self.console.print(table)

        choices = [str(number) for number in range(1, len(options) + 1)]
        try:
            answer = Prompt.ask(
                "Select a group number ([bold]q[/bold] to cancel)",
                choices=choices + ["q"],
                show_choices=False,
                default="q",
                console=self.console,
            )
        except (EOFError, KeyboardInterrupt):
            return None

        if answer == "q":
            return None
        return options[int(answer) - 1][0]


def default_prompt(console: Optional[Console] = None) -> SelectionPrompt:
    fzf = shutil.which("fzf")
    if fzf:
        return FzfPrompt(executable=fzf)
    logger.debug("fzf_not_found", fallback="numbered_prompt")
    return NumberedPrompt(console)


class InteractiveSelector:
    """Presents a listing for single-choice selection.

    Args:
        prompt: Prompt backend; defaults to fzf when available
    """

    def __init__(self, prompt: Optional[SelectionPrompt] = None) -> None:
        self._prompt = prompt

    @property
    def prompt(self) -> SelectionPrompt:
        if self._prompt is None:
            self._prompt = default_prompt()
        return self._prompt

    def select(self, listing: Sequence[Option]) -> Union[str, Cancelled]:
        """Return the chosen id, or CANCELLED.

        An empty listing is cancelled without prompting.
        """
        if not listing:
            logger.warning("selection_skipped", reason="empty_listing")
            return CANCELLED

        choice = self.prompt.choose(listing)
        if not choice:
            logger.info("selection_cancelled")
            return CANCELLED

        logger.debug("selection_made", selected_id=choice)
        return choice
