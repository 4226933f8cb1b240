import io

import pytest

from console_ui import ConsoleUI
from kladeusis import Kladeusis, build_parser, main


@pytest.fixture()
def output():
    return io.StringIO()


@pytest.fixture()
def run_app(output):
    def _run(*argv):
        args = build_parser().parse_args(list(argv))
        return Kladeusis(args, ui=ConsoleUI(file=output)).run()

    return _run


@pytest.fixture()
def answer(monkeypatch):
    def _set(text):
        monkeypatch.setattr("builtins.input", lambda *args: text)

    return _set


def _remaining(root):
    return sorted(p.name for p in root.iterdir())


def test_run_keeps_newest_and_deletes_rest(save_dir, run_app, answer, output):
    root = save_dir("Alice-1_QuickSave_3", "Alice-1_QuickSave_2", "Alice-1_QuickSave_1")
    answer("y")

    result = run_app("-p", str(root), "-s", "1")

    assert result.confirmed
    assert _remaining(root) == ["Alice-1_QuickSave_3"]
    text = output.getvalue()
    assert "1 | Alice-1_QuickSave_2" in text
    assert "2 | Alice-1_QuickSave_1" in text
    assert "Successfully deleted 2 folders" in text


def test_run_declined_deletes_nothing(save_dir, run_app, answer, output):
    root = save_dir("Alice-1_QuickSave_3", "Alice-1_QuickSave_2")
    answer("Yes")

    result = run_app("-p", str(root), "-s", "1")

    assert not result.confirmed
    assert _remaining(root) == ["Alice-1_QuickSave_2", "Alice-1_QuickSave_3"]
    assert "User did not confirm delete" in output.getvalue()


def test_run_drops_unparsable_folder(save_dir, run_app, answer):
    root = save_dir("NoDashHere_QuickSave_5", "Alice-1_QuickSave_2", "Alice-1_QuickSave_1")
    answer("y")

    result = run_app("-p", str(root), "-s", "0")

    assert [p.name for p in result.deleted] == ["Alice-1_QuickSave_2", "Alice-1_QuickSave_1"]
    assert _remaining(root) == ["NoDashHere_QuickSave_5"]


def test_run_verbose_lists_skipped_folders(save_dir, run_app, answer, output):
    root = save_dir("NoDashHere_QuickSave_5")

    run_app("-p", str(root), "-v")

    assert "NoDashHere_QuickSave_5" in output.getvalue()


def test_run_default_preserves_ten(save_dir, run_app, answer):
    root = save_dir(*[f"Alice-1_AutoSave_{n}" for n in range(12)])
    answer("y")

    result = run_app("-p", str(root))

    assert sorted(p.name for p in result.deleted) == ["Alice-1_AutoSave_0", "Alice-1_AutoSave_1"]


def test_run_defaults_to_current_directory(save_dir, run_app, answer, monkeypatch):
    root = save_dir("Alice-1_QuickSave_2", "Alice-1_QuickSave_1")
    monkeypatch.chdir(root)
    answer("y")

    run_app("-s", "1")

    assert _remaining(root) == ["Alice-1_QuickSave_2"]


def test_run_dry_run_never_prompts(save_dir, run_app, monkeypatch, output):
    root = save_dir("Alice-1_QuickSave_2", "Alice-1_QuickSave_1")

    def no_input(*args):
        raise AssertionError("dry run should not prompt")

    monkeypatch.setattr("builtins.input", no_input)

    assert run_app("-p", str(root), "-s", "1", "--dry-run") is None
    assert _remaining(root) == ["Alice-1_QuickSave_1", "Alice-1_QuickSave_2"]
    assert "1 | Alice-1_QuickSave_1" in output.getvalue()


def test_run_nothing_to_delete(save_dir, run_app, output):
    root = save_dir("Alice-1_QuickSave_1")

    assert run_app("-p", str(root)) is None
    assert "Nothing to delete." in output.getvalue()


def test_run_reports_unreadable_directory(tmp_path, run_app, output):
    assert run_app("-p", str(tmp_path / "missing")) is None
    assert "Encountered error:" in output.getvalue()


def test_run_reports_partial_deletion(save_dir, run_app, answer, output):
    root = save_dir("Alice-1_QuickSave_3", "Alice-1_QuickSave_2", "Alice-1_QuickSave_1")
    (root / "Alice-1_QuickSave_1" / "nested").mkdir()
    answer("y")

    assert run_app("-p", str(root), "-s", "1") is None

    text = output.getvalue()
    assert "Successfully deleted 1 folders" in text
    assert "Encountered error:" in text
    assert _remaining(root) == ["Alice-1_QuickSave_1", "Alice-1_QuickSave_3"]


@pytest.mark.parametrize("value", ["-1", "ten"])
def test_parser_rejects_bad_preserve_count(value):
    with pytest.raises(SystemExit):
        build_parser().parse_args(["-s", value])


def test_main_runs_end_to_end(save_dir, monkeypatch, capsys):
    root = save_dir("Alice-1_QuickSave_2", "Alice-1_QuickSave_1")
    monkeypatch.setattr("builtins.input", lambda *args: "y")

    main(["-p", str(root), "-s", "1"])

    assert _remaining(root) == ["Alice-1_QuickSave_2"]
    assert "Successfully deleted 1 folders" in capsys.readouterr().out


def test_run_never_deletes_through_symlinked_folder(tmp_path, run_app, answer):
    root = tmp_path / "saves"
    (root / "Alice-1_QuickSave_2").mkdir(parents=True)
    outside = tmp_path / "precious"
    outside.mkdir()
    (outside / "keep.txt").write_text("keep")
    (root / "Alice-1_QuickSave_1").symlink_to(outside, target_is_directory=True)
    answer("y")

    assert run_app("-p", str(root), "-s", "1") is None

    assert (outside / "keep.txt").read_text() == "keep"
    assert _remaining(root) == ["Alice-1_QuickSave_1", "Alice-1_QuickSave_2"]


def test_run_closed_stdin_counts_as_declined(save_dir, run_app, monkeypatch, output):
    root = save_dir("Alice-1_QuickSave_2", "Alice-1_QuickSave_1")

    def closed_stdin(*args):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed_stdin)

    result = run_app("-p", str(root), "-s", "1")

    assert not result.confirmed
    assert _remaining(root) == ["Alice-1_QuickSave_1", "Alice-1_QuickSave_2"]
    assert "User did not confirm delete" in output.getvalue()
