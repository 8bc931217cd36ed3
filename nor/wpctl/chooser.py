import abc
import logging

from iterfzf import iterfzf

from nor import process
from nor.config import DEFAULT_MENU

logger = logging.getLogger(__name__)


class Chooser(abc.ABC):
    """Abstract base class for interactive single-item selection."""

    @abc.abstractmethod
    def choose(self, names: list[str], prompt: str) -> str | None:
        """Let the user pick one of ``names``. Returns None when the user aborts."""
        ...


class FuzzyChooser(Chooser):
    """Fuzzy finder running inside the current terminal.

    fzf exiting with any failure status, or being interrupted, counts as an abort.
    """

    def __init__(self, executable: str | None = None) -> None:
        self.executable = executable

    def choose(self, names: list[str], prompt: str) -> str | None:
        if not prompt.endswith(": "):
            prompt = f"{prompt}: "
        kwargs = {"executable": self.executable} if self.executable else {}
        logger.debug(f"Choosing among {len(names)} items with fzf")
        try:
            selection = iterfzf(names, prompt=prompt, multi=False, mouse=False, **kwargs)
        except KeyboardInterrupt:
            selection = None
        if selection is None:
            logger.info("Selection aborted")
        return selection


class MenuChooser(Chooser):
    """External menu launcher (rofi in dmenu mode) fed through stdin."""

    def __init__(self, executable: str = DEFAULT_MENU) -> None:
        self.executable = executable

    def choose(self, names: list[str], prompt: str) -> str | None:
        result = process.run([self.executable, "-p", prompt, "-dmenu"], input="\n".join(names), check=False)
        if result.returncode != 0:
            logger.info(f"{self.executable} exited with status {result.returncode}, selection aborted")
            return None
        selection = result.stdout.strip()
        return selection or None


def select_chooser(prefer_gui: bool, interactive: bool, menu: str = DEFAULT_MENU) -> Chooser:
    """Use the fuzzy finder on a terminal unless GUI is preferred, the menu launcher otherwise."""
    if interactive and not prefer_gui:
        return FuzzyChooser()
    return MenuChooser(menu)
