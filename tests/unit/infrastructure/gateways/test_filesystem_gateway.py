"""Unit tests for FileSystemGateway."""

from pathlib import Path

import pytest

from literal_indent_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "a.py").write_text("a = 1\n")
    (tmp_path / "pkg" / "b.py").write_text("b = 2\n")
    (tmp_path / "build").mkdir()
    (tmp_path / "build" / "gen.py").write_text("g = 3\n")
    (tmp_path / "notes.txt").write_text("not python\n")
    return tmp_path


class TestGlobPythonFiles:
    """Discovery of Python files."""

    def test_directory_is_searched_recursively_and_sorted(self, project: Path) -> None:
        files = FileSystemGateway().glob_python_files(str(project))
        assert [Path(f).relative_to(project.resolve()).as_posix() for f in files] == [
            "build/gen.py",
            "pkg/a.py",
            "pkg/b.py",
        ]

    def test_single_python_file(self, project: Path) -> None:
        target = project / "pkg" / "a.py"
        assert FileSystemGateway().glob_python_files(str(target)) == [str(target.resolve())]

    def test_non_python_file_yields_nothing(self, project: Path) -> None:
        assert FileSystemGateway().glob_python_files(str(project / "notes.txt")) == []

    def test_exclude_by_file_name(self, project: Path) -> None:
        files = FileSystemGateway().glob_python_files(str(project), exclude=["gen.py"])
        assert all(not f.endswith("gen.py") for f in files)
        assert len(files) == 2

    def test_exclude_by_relative_path(self, project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(project)
        files = FileSystemGateway().glob_python_files(str(project), exclude=["build/*"])
        assert [Path(f).name for f in files] == ["a.py", "b.py"]


class TestTextIO:
    """Reading and writing keeps content byte-exact."""

    def test_crlf_round_trip(self, tmp_path: Path) -> None:
        target = tmp_path / "crlf.py"
        target.write_bytes(b"x = [\r\n    1,\r\n]\r\n")
        gateway = FileSystemGateway()
        content = gateway.read_text(str(target))
        assert content == "x = [\r\n    1,\r\n]\r\n"
        gateway.write_text(str(target), content.replace("1", "2"))
        assert target.read_bytes() == b"x = [\r\n    2,\r\n]\r\n"

    def test_relative_path_inside_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "m.py").write_text("")
        assert FileSystemGateway().relative_path(str(tmp_path / "m.py")) == "m.py"

    def test_relative_path_outside_cwd_unchanged(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        inner = tmp_path / "inner"
        inner.mkdir()
        monkeypatch.chdir(inner)
        outside = str(tmp_path / "other.py")
        assert FileSystemGateway().relative_path(outside) == outside

    def test_resolve_path_is_absolute(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert Path(FileSystemGateway().resolve_path("x.py")).is_absolute()
