# rootkeeper

rootkeeper is a small interactive file manager for the terminal. It keeps
you inside one root directory. You can create, delete, rename and enter
sub-directories and list their contents. You can also create, read, edit
and delete text (`.txt`) and data (`.dat`) files. Each thing you do is
recorded in an activity log for the session.

## Installation

```
pip install .
```

## Running it

```
rootkeeper [root]
```

`root` is the directory to work in. It defaults to `root`, relative to the
current working directory. It is created if it does not exist yet.

### Directory menu

```
1. Create Directory
2. Delete Directory
3. Rename Directory
4. Change Directory
5. Go Back
6. Reset to Root
7. File Operations
8. List Contents
0. Exit
```

- Option `9` is not listed on the menu. It prints the session's activity
  log, one `User has ... @ <time>` entry per line.
- Directory names may not contain spaces.
- "Go Back" stops at the root.
- "Delete Directory" removes the directory and everything in it.
- "List Contents" shows each entry as `[DIR]` or `[FILE]`, sorted by name.

When an operation fails, its message is printed and the menu is shown
again. Examples are a name that already exists or a directory that cannot
be found. The menu ends on `0` or at the end of input.

### File menu

```
1. Create File
2. Read file
3. Edit file
4. Delete file
0. Return to Directory Menu
```

- A new file needs a name without spaces and the extension `txt` or `dat`.
  Its first line is `Hello world`. A new `.txt` file opens in the editor
  straight away.
- Read and Edit take the file name together with its extension.
- Delete takes the name without `.txt`. It deletes only `<name>.txt`, and
  only after you answer `Y` or `y`. `N` or `n` cancels. Any other answer is
  reported as invalid input.

## Using it from Python

```python
from pathlib import Path

from rootkeeper.activity import ActivityLog
from rootkeeper.directories import DirectoryTools
from rootkeeper.files import FileTools

log = ActivityLog()
tools = DirectoryTools(Path("root"), log)
tools.create_directory("notes")
tools.change_directory("notes")

files = FileTools(tools.current_directory, log, editor=lambda path: None)
files.create_file("todo", "txt")
print(files.read_file("todo.txt"))        # ['Hello world']
files.delete_file("todo", confirm=lambda: "y")

for entry in tools.list_contents():
    print(entry)

log.display()
```

The operations raise exceptions when they fail:

- `InvalidNameError` (a `ValueError`) for a name that contains a space or
  an unsupported file extension.
- `NavigationError` when a move is not possible, such as entering a
  missing directory or going back from the root.
- `FileExistsError` or `FileNotFoundError` when the target already exists
  or does not exist.

`InvalidNameError`, `NavigationError` and `contains_whitespace` live in
`rootkeeper.directories`.

`ActivityLog` takes an optional `clock` callable that returns a `datetime`.
It can be iterated over, and `len()` gives the number of entries.

## Limitations

- The activity log is kept in memory only. It is lost when the program
  exits and is never written to disk.
- The file menu always uses `notepad.exe` as its editor. Where that program
  is not available, creating a `.txt` file still writes the file, but the
  editor cannot start and an error message is printed. The same applies to
  "Edit file". From Python you can pass any `editor` callable to
  `FileTools`.