from pathlib import Path

import pytest


@pytest.fixture(scope="module")
def csv_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test CSV files once per module."""
    dir_path: Path = tmp_path_factory.mktemp("csv")

    (dir_path / "comma.csv").write_bytes(b"id,name,city\n1,Ann,\n2,,Oslo\n")
    (dir_path / "semicolon.csv").write_bytes(b"id;name\n1;Ren\xc3\xa9\n")
    (dir_path / "latin1.csv").write_bytes("id,name\n1,Ren\xe9\n".encode("latin-1"))
    (dir_path / "empty.csv").write_bytes(b"")

    return dir_path
