"""Interactive menus for managing directories and files."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import TextIO

from .directories import DirectoryTools, NavigationError
from .files import FileTools

_DIRECTORY_MENU = """
========== Directory Menu ==========
Current Directory: "{cwd}"
1. Create Directory
2. Delete Directory
3. Rename Directory
4. Change Directory
5. Go Back
6. Reset to Root
7. File Operations
8. List Contents
0. Exit
Enter option: """

_FILE_MENU = """
=========== File Menu ===========
Current Directory: "{cwd}"
1. Create File
2. Read file
3. Edit file
4. Delete file
0. Return to Directory Menu
Enter option: """

_ERRORS = (OSError, ValueError, NavigationError)


def _ask(prompt: str, input_func: Callable[[], str], output: TextIO) -> str:
    output.write(prompt)
    output.flush()
    return input_func()


def _option(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


def directory_menu(
    tools: DirectoryTools,
    input_func: Callable[[], str] = input,
    output: TextIO | None = None,
) -> None:
    """Run the directory menu until the user exits or input ends."""
    out = output if output is not None else sys.stdout
    try:
        while True:
            choice = _option(
                _ask(_DIRECTORY_MENU.format(cwd=tools.current_directory), input_func, out)
            )
            try:
                if choice == 0:
                    return
                if choice == 1:
                    name = _ask("Enter directory name: ", input_func, out)
                    path = tools.create_directory(name)
                    out.write(f'Directory created: "{path}"\n')
                elif choice == 2:
                    name = _ask("Enter directory name to delete: ", input_func, out)
                    path = tools.delete_directory(name)
                    out.write(f'Directory deleted: "{path}"\n')
                elif choice == 3:
                    old = _ask("Enter current directory name: ", input_func, out)
                    new = _ask("Enter new directory name: ", input_func, out)
                    tools.rename_directory(old, new)
                    out.write("Directory renamed.\n")
                elif choice == 4:
                    name = _ask("Enter directory name to enter: ", input_func, out)
                    tools.change_directory(name)
                elif choice == 5:
                    tools.go_back()
                elif choice == 6:
                    tools.reset_to_root()
                elif choice == 7:
                    file_menu(
                        FileTools(tools.current_directory, log=tools.log),
                        input_func,
                        out,
                    )
                elif choice == 8:
                    out.write(f'Contents of "{tools.current_directory}":\n')
                    for entry in tools.list_contents():
                        tag = "[DIR] " if entry.is_dir() else "[FILE] "
                        out.write(f'{tag}"{entry.name}"\n')
                elif choice == 9:
                    tools.log.display(out)
                else:
                    out.write("Invalid option.\n")
            except _ERRORS as exc:
                out.write(f"{exc}\n")
    except EOFError:
        return


def file_menu(
    tools: FileTools,
    input_func: Callable[[], str] = input,
    output: TextIO | None = None,
) -> None:
    """Run the file menu until the user returns or input ends."""
    out = output if output is not None else sys.stdout
    try:
        while True:
            choice = _option(
                _ask(_FILE_MENU.format(cwd=tools.current_directory), input_func, out)
            )
            try:
                if choice == 0:
                    return
                if choice == 1:
                    name = _ask("Enter file name (no extension): ", input_func, out)
                    ext = _ask("Enter file extension (txt, dat): ", input_func, out)
                    path = tools.create_file(name, ext)
                    if ext != "txt":
                        out.write(f"{path.name} has been created.\n")
                elif choice == 2:
                    name = _ask(
                        "Enter file name (with extension, txt only): ", input_func, out
                    )
                    for line in tools.read_file(name):
                        out.write(line + "\n")
                elif choice == 3:
                    name = _ask(
                        "Enter file name (with extension, txt only): ", input_func, out
                    )
                    tools.edit_file(name)
                elif choice == 4:
                    name = _ask(
                        "Enter file name (with extension, txt only): ", input_func, out
                    )

                    def confirm(name: str = name) -> str:
                        out.write(f"{name} found.\n")
                        return _ask(
                            "Please confirm deletion order Y/N: \n", input_func, out
                        )

                    if tools.delete_file(name, confirm):
                        out.write("Deletion confirmed.\n")
                    else:
                        out.write("Deletion cancelled.\n")
                else:
                    out.write("Invalid option.\n")
            except _ERRORS as exc:
                out.write(f"{exc}\n")
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    """Start the directory menu in the given root directory."""
    parser = argparse.ArgumentParser(
        prog="rootkeeper", description="Manage directories and files under a root."
    )
    parser.add_argument("root", nargs="?", default="root", help="root directory")
    args = parser.parse_args(argv)
    directory_menu(DirectoryTools(args.root))
    return 0


if __name__ == "__main__":
    sys.exit(main())