import os

from pipex.cli import main, run_pipeline


def _infile(tmp_path, text):
    path = tmp_path / "in.txt"
    path.write_text(text)
    return str(path)


def test_pipeline_runs_both_commands(tmp_path):
    infile = _infile(tmp_path, "hello world\n")
    outfile = tmp_path / "out.txt"
    codes = run_pipeline(infile, "cat", "tr a-z A-Z", str(outfile), dict(os.environ))
    assert codes == (0, 0)
    assert outfile.read_text() == "HELLO WORLD\n"


def test_pipeline_passes_arguments(tmp_path):
    infile = _infile(tmp_path, "one\ntwo\nthree\n")
    outfile = tmp_path / "out.txt"
    run_pipeline(infile, "head -2", "cat", str(outfile))
    assert outfile.read_text() == "one\ntwo\n"


def test_pipeline_missing_first_command(tmp_path, capsys):
    infile = _infile(tmp_path, "data\n")
    outfile = tmp_path / "out.txt"
    codes = run_pipeline(infile, "nosuchcommand_pipex", "cat", str(outfile))
    assert codes == (1, 0)
    assert outfile.read_text() == ""
    assert "command not found: nosuchcommand_pipex" in capsys.readouterr().err


def test_pipeline_without_path(tmp_path, capsys):
    infile = _infile(tmp_path, "data\n")
    outfile = tmp_path / "out.txt"
    codes = run_pipeline(infile, "cat", "cat", str(outfile), {})
    assert codes == (1, 1)
    assert capsys.readouterr().err.count("command not found: cat") == 2


def test_main_wrong_arguments(capsys):
    assert main(["only", "three", "args"]) == 0
    err = capsys.readouterr().err
    assert "Wrong number of arguments." in err
    assert "Example: ./pipex file1 'cmd1' 'cmd2' file2" in err


def test_main_missing_infile(tmp_path, capsys):
    outfile = tmp_path / "out.txt"
    missing = str(tmp_path / "missing.txt")
    assert main([missing, "cat", "cat", str(outfile)]) == 1
    assert not outfile.exists()
    assert missing in capsys.readouterr().err


def test_main_success(tmp_path):
    infile = _infile(tmp_path, "abc\n")
    outfile = tmp_path / "out.txt"
    outfile.write_text("stale contents that must go\n")
    assert main([infile, "cat", "cat", str(outfile)]) == 0
    assert outfile.read_text() == "abc\n"