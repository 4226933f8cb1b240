import pytest

from save_parser import SaveCategory, SaveRecord

_CATEGORY_TOKENS = {
    SaveCategory.QUICK: "QuickSave",
    SaveCategory.AUTO: "AutoSave",
    SaveCategory.UNRECOGNIZED: "ManualSave",
}


@pytest.fixture()
def make_save():
    """Build a SaveRecord whose file name follows the save folder convention"""

    def _make(character_name, category, sequence_number):
        file_name = f"{character_name}-123456789__{_CATEGORY_TOKENS[category]}_{sequence_number}"
        return SaveRecord(
            file_name=file_name,
            character_name=character_name,
            category=category,
            sequence_number=sequence_number,
        )

    return _make


@pytest.fixture()
def save_dir(tmp_path):
    """Create save folders, each holding a couple of files, under tmp_path"""

    def _create(*names, files=("save.dat", "screenshot.png")):
        for name in names:
            folder = tmp_path / name
            folder.mkdir()
            for file_name in files:
                (folder / file_name).write_bytes(b"x")
        return tmp_path

    return _create
