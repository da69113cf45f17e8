import pytest

from rootkeeper.activity import ActivityLog
from rootkeeper.directories import InvalidNameError
from rootkeeper.files import FileTools


@pytest.fixture
def opened():
    return []


@pytest.fixture
def tools(tmp_path, opened):
    return FileTools(tmp_path / "root", log=ActivityLog(), editor=opened.append)


def test_constructor_creates_root_without_logging(tmp_path):
    log = ActivityLog()
    tools = FileTools(tmp_path / "r", log=log, editor=lambda p: None)
    assert tools.current_directory == tmp_path / "r"
    assert (tmp_path / "r").is_dir()
    assert len(log) == 0


def test_create_dat_file_writes_greeting(tools, opened):
    path = tools.create_file("data", "dat")
    assert path.name == "data.dat"
    assert path.read_text() == "Hello world\n"
    assert opened == []


def test_create_txt_file_opens_editor(tools, opened):
    path = tools.create_file("notes", "txt")
    assert opened == [path]
    assert path.read_text() == "Hello world\n"


def test_create_file_rejects_unknown_extension(tools):
    with pytest.raises(InvalidNameError, match="Invalid file extension: exe"):
        tools.create_file("prog", "exe")
    assert not (tools.root / "prog.exe").exists()


def test_create_file_rejects_space(tools):
    with pytest.raises(InvalidNameError):
        tools.create_file("my notes", "dat")


def test_create_existing_file_fails(tools):
    tools.create_file("data", "dat")
    with pytest.raises(FileExistsError, match="data.dat already exists."):
        tools.create_file("data", "dat")


def test_read_file_returns_lines(tools):
    tools.create_file("data", "dat")
    assert tools.read_file("data.dat") == ["Hello world"]


def test_read_missing_file_fails(tools):
    with pytest.raises(FileNotFoundError):
        tools.read_file("nothing.txt")


def test_edit_file_opens_editor(tools, opened):
    tools.create_file("data", "dat")
    path = tools.edit_file("data.dat")
    assert opened == [path]


def test_edit_missing_file_fails(tools, opened):
    with pytest.raises(FileNotFoundError):
        tools.edit_file("nothing.txt")
    assert opened == []


@pytest.mark.parametrize("answer", ["y", "Y", " yes"])
def test_delete_confirmed(tools, answer):
    path = tools.create_file("notes", "txt")
    assert tools.delete_file("notes", lambda: answer) is True
    assert not path.exists()


@pytest.mark.parametrize("answer", ["n", "N"])
def test_delete_declined(tools, answer):
    path = tools.create_file("notes", "txt")
    assert tools.delete_file("notes", lambda: answer) is False
    assert path.exists()


def test_delete_invalid_answer_keeps_file(tools):
    path = tools.create_file("notes", "txt")
    with pytest.raises(ValueError, match="Invalid input!"):
        tools.delete_file("notes", lambda: "maybe")
    assert path.exists()


def test_delete_missing_file_does_not_ask(tools):
    asked = []
    with pytest.raises(FileNotFoundError):
        tools.delete_file("notes", lambda: asked.append(1) or "y")
    assert asked == []


def test_files_follow_current_directory(tools):
    tools.create_directory("sub")
    tools.change_directory("sub")
    path = tools.create_file("data", "dat")
    assert path == tools.root / "sub" / "data.dat"