import os

import pytest

from pipechain.pipeline import Stage, plan_stages, run_pipeline

ENV = {"PATH": os.environ.get("PATH", "/usr/bin:/bin")}


def test_plan_stages_resolves_known_command():
    [stage] = plan_stages(["cat -e"], ENV)
    assert stage.words == ("cat", "-e")
    assert os.path.basename(stage.path) == "cat"
    assert stage.runnable
    assert stage.error is None


def test_plan_stages_unknown_command():
    [stage] = plan_stages(["no_such_command_zz arg"], ENV)
    assert stage.error == "command not found : no_such_command_zz"
    assert not stage.runnable


def test_plan_stages_empty_command():
    [stage] = plan_stages(["   "], ENV)
    assert stage.words == ()
    assert stage.error == "Command '' not found"


def test_plan_stages_directory_path():
    [stage] = plan_stages(["/bin/"], ENV)
    assert stage.error == "/bin/: is a directory"


def test_plan_stages_keeps_order():
    stages = plan_stages(["cat", "nope_zz", "cat"], ENV)
    assert [s.runnable for s in stages] == [True, False, True]
    assert all(isinstance(s, Stage) for s in stages)


def test_round_trip_through_two_cats(tmp_path):
    data = bytes(range(256)) * 40
    infile = tmp_path / "in"
    infile.write_bytes(data)
    outfile = tmp_path / "out"
    codes = run_pipeline(["cat", "cat"], str(infile), str(outfile), env=ENV)
    assert codes == [0, 0]
    assert outfile.read_bytes() == data


def test_transform_with_tr(tmp_path):
    infile = tmp_path / "in"
    infile.write_text("hello world\n")
    outfile = tmp_path / "out"
    run_pipeline(["cat", "tr a-z A-Z"], str(infile), str(outfile), env=ENV)
    assert outfile.read_text() == "HELLO WORLD\n"


def test_three_stages_invert_each_other(tmp_path):
    text = "mixed text line\nanother one\n"
    infile = tmp_path / "in"
    infile.write_text(text)
    outfile = tmp_path / "out"
    codes = run_pipeline(
        ["cat", "tr a-z A-Z", "tr A-Z a-z"], str(infile), str(outfile), env=ENV
    )
    assert codes == [0, 0, 0]
    assert outfile.read_text() == text


def test_missing_infile_skips_first_stage(tmp_path, capsys):
    missing = tmp_path / "missing"
    outfile = tmp_path / "out"
    codes = run_pipeline(["cat", "cat"], str(missing), str(outfile), env=ENV)
    assert codes[0] == 1
    assert outfile.exists()
    assert outfile.read_bytes() == b""
    assert str(missing) in capsys.readouterr().err


def test_truncates_existing_outfile(tmp_path):
    outfile = tmp_path / "out"
    outfile.write_text("old content that is long\n" * 10)
    run_pipeline(["cat", "cat"], None, str(outfile), env=ENV, input_data="new\n")
    assert outfile.read_text() == "new\n"


def test_append_keeps_existing_content(tmp_path):
    outfile = tmp_path / "out"
    outfile.write_text("first\n")
    run_pipeline(
        ["cat", "cat"], None, str(outfile), append=True, env=ENV, input_data="second\n"
    )
    assert outfile.read_text() == "first\nsecond\n"


def test_unknown_middle_command_empties_output(tmp_path, capsys):
    infile = tmp_path / "in"
    infile.write_text("data\n")
    outfile = tmp_path / "out"
    codes = run_pipeline(
        ["cat", "no_such_command_zz", "cat"], str(infile), str(outfile), env=ENV
    )
    assert codes[1] == 1
    assert codes[2] == 0
    assert outfile.read_text() == ""
    assert "command not found : no_such_command_zz" in capsys.readouterr().out


def test_unwritable_outfile_skips_last_stage(tmp_path, capsys):
    infile = tmp_path / "in"
    infile.write_text("data\n")
    outfile = tmp_path / "nodir" / "out"
    codes = run_pipeline(["cat", "cat"], str(infile), str(outfile), env=ENV)
    assert codes[-1] == 1
    assert not outfile.exists()
    assert str(outfile) in capsys.readouterr().err


def test_single_stage_with_input_data(tmp_path):
    outfile = tmp_path / "out"
    codes = run_pipeline(["cat"], None, str(outfile), env=ENV, input_data=b"abc")
    assert codes == [0]
    assert outfile.read_bytes() == b"abc"


def test_environment_is_passed_to_children(tmp_path):
    outfile = tmp_path / "out"
    env = dict(ENV, FOO="bar")
    run_pipeline(["cat", "printenv FOO"], None, str(outfile), env=env, input_data="")
    assert outfile.read_text() == "bar\n"


def test_no_commands_is_an_error(tmp_path):
    with pytest.raises(ValueError):
        run_pipeline([], None, str(tmp_path / "out"), input_data="x")


def test_no_input_is_an_error(tmp_path):
    with pytest.raises(ValueError):
        run_pipeline(["cat"], None, str(tmp_path / "out"))