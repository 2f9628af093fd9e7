import pytest

from tgsh.history import DefaultHistory, FileBackedHistory, HistoryFileError


def test_default_history_most_recent_first():
    hist = DefaultHistory()
    assert hist.is_empty()
    hist.add("first")
    hist.add("second")
    assert hist.get(0) == "second"
    assert hist.get(1) == "first"
    assert len(hist) == 2
    assert not hist.is_empty()


def test_default_history_out_of_range():
    hist = DefaultHistory()
    hist.add("only")
    assert hist.get(1) is None
    assert hist.get(-1) is None


def test_default_history_clear():
    hist = DefaultHistory()
    hist.add("a")
    hist.clear()
    assert len(hist) == 0
    assert hist.get(0) is None


def test_file_history_creates_file(tmp_path):
    path = tmp_path / "history"
    hist = FileBackedHistory(path)
    assert path.exists()
    assert hist.is_empty()


def test_file_history_reads_existing_lines(tmp_path):
    path = tmp_path / "history"
    path.write_text("pwd\r\nls\n")
    hist = FileBackedHistory(path)
    assert [hist.get(i) for i in range(len(hist))] == ["pwd", "ls"]


def test_file_history_add_writes_deduplicated(tmp_path):
    path = tmp_path / "history"
    hist = FileBackedHistory(path)
    hist.add("ls")
    hist.add("pwd")
    hist.add("ls")
    assert path.read_text() == "ls\npwd"
    assert len(hist) == 2
    assert FileBackedHistory(path).get(0) == "ls"


def test_file_history_clear_empties_file(tmp_path):
    path = tmp_path / "history"
    path.write_text("a\nb\n")
    hist = FileBackedHistory(path)
    hist.clear()
    assert path.read_text() == ""
    assert hist.is_empty()


def test_file_history_directory_is_error(tmp_path):
    with pytest.raises(HistoryFileError):
        FileBackedHistory(tmp_path)


def test_file_history_flush_error_when_file_removed(tmp_path):
    path = tmp_path / "history"
    hist = FileBackedHistory(path)
    path.unlink()
    with pytest.raises(HistoryFileError):
        hist.add("ls")