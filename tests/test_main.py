"""Tests for main.dump — the --print command-line path."""
import main
from vxd.core.settings_manager import SettingsManager


def _settings(tmp_path):
    return SettingsManager(tmp_path / "settings.ini")


class TestDump:
    def test_prints_variables(self, vxd_file, tmp_path, capsys):
        path = vxd_file('B: bool = true;\nA: string = "x";\n')
        assert main.dump([path], _settings(tmp_path)) == 0
        out = capsys.readouterr().out
        assert out.splitlines() == ["A: string -> x", "B: bool -> true"]

    def test_error_exit_code(self, vxd_file, tmp_path, capsys):
        path = vxd_file("X: foo = 1;")
        assert main.dump([path], _settings(tmp_path)) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Unsupported type: foo" in captured.err

    def test_lenient(self, vxd_file, tmp_path, capsys):
        path = vxd_file("X: foo = 1; Y: int32 = 2;")
        assert main.dump([path], _settings(tmp_path), lenient=True) == 0
        assert capsys.readouterr().out.strip() == "Y: int32 -> 2"

    def test_warning_to_stderr(self, vxd_file, tmp_path, capsys):
        path = vxd_file("F: bool = maybe;")
        main.dump([path], _settings(tmp_path))
        captured = capsys.readouterr()
        assert captured.out.strip() == "F: Null"
        assert "[WARNING]" in captured.err

    def test_multiple_files_headed(self, vxd_file, tmp_path, capsys):
        a = vxd_file("A: int32 = 1;", name="a.vxd")
        b = vxd_file("B: int32 = 2;", name="b.vxd")
        main.dump([a, b], _settings(tmp_path))
        out = capsys.readouterr().out
        assert f"== {a}" in out and f"== {b}" in out


class TestMainArgs:
    def test_print_mode(self, vxd_file, capsys):
        path = vxd_file("A: char = q;")
        assert main.main(["--print", str(path)]) == 0
        assert capsys.readouterr().out.strip() == "A: char -> q"

    def test_encoding_flag(self, tmp_path, capsys):
        path = tmp_path / "latin.vxd"
        path.write_bytes("C: char = é;".encode("latin-1"))
        assert main.main(["--print", "--encoding", "latin-1", str(path)]) == 0
        assert capsys.readouterr().out.strip() == "C: char -> é"

    def test_unknown_encoding_exit_code(self, vxd_file, capsys):
        path = vxd_file("A: int32 = 1;")
        assert main.main(["--print", "--encoding", "no-such-codec", str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "[ERROR]" in captured.err


class TestDumpEncoding:
    def test_overrides_settings(self, tmp_path, capsys):
        ini = tmp_path / "settings.ini"
        ini.write_text("[PARSER]\nencoding = utf-8\n", encoding="utf-8")
        path = tmp_path / "latin.vxd"
        path.write_bytes("C: char = é;".encode("latin-1"))
        settings = SettingsManager(ini)
        assert main.dump([path], settings) == 1
        capsys.readouterr()
        assert main.dump([path], settings, encoding="latin-1") == 0
        assert capsys.readouterr().out.strip() == "C: char -> é"
