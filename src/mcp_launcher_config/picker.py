"""Interactive project-directory selection.

The dialog is the only blocking, user-driven step; everything else in the
package is plain synchronous I/O. Callers and tests pass any object with a
``pick_directory(title)`` method in place of the native dialog.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from .errors import PickerChannelError

logger = logging.getLogger(__name__)

PROJECT_DIRECTORY_TITLE = "Select Project Directory"


class DirectoryPicker(Protocol):
    """Shows a folder dialog and blocks until the user picks or dismisses it."""

    def pick_directory(self, title: str) -> str | None: ...


class TkDirectoryPicker:
    """Native folder dialog via tkinter, on a hidden throwaway root window."""

    def pick_directory(self, title: str) -> str | None:
        import tkinter
        from tkinter import filedialog

        try:
            root = tkinter.Tk()
        except tkinter.TclError as e:
            raise PickerChannelError(f"Failed to open directory dialog: {e}") from e
        try:
            root.withdraw()
            # askdirectory returns "" (or an empty tuple on some Tk builds) on cancel
            chosen = filedialog.askdirectory(parent=root, title=title, mustexist=True)
        except tkinter.TclError as e:
            raise PickerChannelError(f"Directory dialog failed: {e}") from e
        finally:
            root.destroy()
        return str(chosen) if chosen else None


class FixedDirectoryPicker:
    """Answers every dialog with a preset path (None = cancel) or raises a preset error.

    Used in tests and headless front ends; records the titles it was asked with.
    """

    def __init__(self, result: str | None = None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.titles: list[str] = []

    def pick_directory(self, title: str) -> str | None:
        self.titles.append(title)
        if self.error is not None:
            raise self.error
        return self.result


def pick_project_directory(picker: DirectoryPicker | None = None) -> Path | None:
    """Ask the user for a project directory; None if the dialog was dismissed.

    The path is returned as chosen; it is not checked for existence here.
    """
    picker = picker if picker is not None else TkDirectoryPicker()
    try:
        chosen = picker.pick_directory(PROJECT_DIRECTORY_TITLE)
    except PickerChannelError:
        raise
    except (OSError, RuntimeError) as e:
        raise PickerChannelError(f"Directory dialog closed before returning a result: {e}") from e
    if not chosen:
        logger.debug("Directory selection cancelled")
        return None
    logger.debug("Selected project directory %s", chosen)
    return Path(chosen)
