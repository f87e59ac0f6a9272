"""
Tests for the command line interface.
"""

import pytest

from minicpu_asm.__main__ import main


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "prog.asm"
    path.write_text("mov r1,r0\nlad 1 2A,r2\nhalt\n")
    return path


class TestMain:
    """Tests for the main entry point."""

    def test_assemble_to_output(self, source, tmp_path):
        out = tmp_path / "prog.txt"
        main([str(source), "-o", str(out)])
        assert out.read_text().splitlines()[0] == "$P 00 41 ;mov r1,r0"

    def test_default_output(self, source, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        main([str(source)])
        assert len((tmp_path / "build.txt").read_text().splitlines()) == 4

    def test_config_file(self, source, tmp_path):
        config = tmp_path / "asm.yaml"
        config.write_text(f"output_path: '{tmp_path / 'cfg.txt'}'\nannotate: false\n")
        main([str(source), "--config", str(config)])
        assert (tmp_path / "cfg.txt").read_text() == "$P 00 41\n$P 01 C6\n$P 02 2A\n$P 03 50\n"

    def test_output_overrides_config(self, source, tmp_path):
        config = tmp_path / "asm.yaml"
        config.write_text(f"output_path: '{tmp_path / 'cfg.txt'}'\n")
        main([str(source), "-c", str(config), "-o", str(tmp_path / "cli.txt")])
        assert (tmp_path / "cli.txt").exists()
        assert not (tmp_path / "cfg.txt").exists()

    def test_verbose_and_listing(self, source, tmp_path, capsys):
        main([str(source), "-o", str(tmp_path / "out.txt"), "-v", "--listing"])
        out = capsys.readouterr().out
        assert "Index  Code" in out
        assert "Assembly successful: 4 bytes" in out

    def test_missing_argument(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 2

    def test_encoding_error_reports_line(self, tmp_path, capsys):
        src = tmp_path / "bad.asm"
        src.write_text("halt\n\nmov r1,q9\n")
        with pytest.raises(SystemExit) as excinfo:
            main([str(src), "-o", str(tmp_path / "out.txt")])
        assert excinfo.value.code == 1
        err = capsys.readouterr().err
        assert "error: Unknown register name 'q9'" in err
        assert "at line 3" in err
        assert (tmp_path / "out.txt").read_text() == "$P 00 50 ;halt\n"

    def test_undecodable_byte_reports_line(self, tmp_path, capsys):
        src = tmp_path / "bad.asm"
        src.write_bytes(b"halt\nin r1,\xfe\n")
        with pytest.raises(SystemExit) as excinfo:
            main([str(src), "-o", str(tmp_path / "out.txt")])
        assert excinfo.value.code == 1
        err = capsys.readouterr().err
        assert "error: Address format error: '\\udcfe'" in err
        assert "at line 2" in err

    def test_missing_source(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([str(tmp_path / "missing.asm"), "-o", str(tmp_path / "out.txt")])
        assert excinfo.value.code == 1
        err = capsys.readouterr().err
        assert "error: Cannot open source file" in err
        assert "at line 0" in err

    def test_invalid_config(self, source, tmp_path, capsys):
        config = tmp_path / "asm.yaml"
        config.write_text("verbose: maybe\n")
        with pytest.raises(SystemExit) as excinfo:
            main([str(source), "-c", str(config)])
        assert excinfo.value.code == 1
        assert "'verbose' must be of type bool" in capsys.readouterr().err
