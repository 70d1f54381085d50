# tests/test_pipeline.py
import pytest

from apt_buildpack.lib.command import CommandError
from apt_buildpack.main import build_steps, run
from apt_buildpack.pipeline import run_pipeline


@pytest.fixture
def manifest(aptfile):
    with open(aptfile, "w", encoding="utf-8") as f:
        f.write(
            "keys:\n- https://example.com/public.key\n"
            "repos:\n- deb http://apt.example.com stable main\n"
            "packages:\n- disneyland\n"
        )


def test_steps_run_in_fixed_order(apt, manifest):
    result = run_pipeline(apt=apt, steps=build_steps())

    assert result.ran_steps == [
        "10_setup",
        "20_add_keys",
        "30_add_repos",
        "40_update",
        "50_download",
        "60_install",
    ]


def test_commands_issued_in_order(apt, mock_command, manifest):
    run_pipeline(apt=apt, steps=build_steps())

    tools = [c.args[1] for c in mock_command.output.call_args_list]
    assert tools == ["apt-key", "apt-get", "apt-get"]
    assert mock_command.output.call_args_list[1].args[-1] == "update"
    assert mock_command.output.call_args_list[2].args[-1] == "disneyland"


def test_repos_appended_after_template(apt, manifest, templates):
    run_pipeline(apt=apt, steps=build_steps(), stop_after="30_add_repos")

    with open(apt.layout.sources_list, encoding="utf-8") as f:
        assert f.read() == (
            "deb http://archive.ubuntu.com/ubuntu jammy main\n"
            "\n"
            "deb http://apt.example.com stable main"
        )


def test_outputs_are_recorded(apt, mock_command, manifest):
    mock_command.output.return_value = "Shell output"

    result = run_pipeline(apt=apt, steps=build_steps())

    assert result.outputs["40_update"] == "Shell output"
    assert result.outputs["50_download"] == ""


def test_stop_after(apt, mock_command, manifest):
    result = run_pipeline(apt=apt, steps=build_steps(), stop_after="20_add_keys")

    assert result.ran_steps == ["10_setup", "20_add_keys"]
    assert mock_command.output.call_count == 1


def test_failure_stops_pipeline(apt, mock_command, manifest):
    mock_command.output.side_effect = ["", CommandError(["apt-get", "update"], 100)]

    with pytest.raises(CommandError):
        run_pipeline(apt=apt, steps=build_steps())

    assert mock_command.output.call_count == 2


def test_unknown_step_id_rejected(apt, mock_command):
    with pytest.raises(ValueError):
        run_pipeline(apt=apt, steps=build_steps(), start_at="99_nope")

    mock_command.output.assert_not_called()


def test_start_at_loads_manifest(apt, mock_command, manifest):
    result = run(apt=apt, start_at="50_download", stop_after="50_download")

    assert result.ran_steps == ["50_download"]
    assert apt.packages == ["disneyland"]
    assert mock_command.output.call_args.args[-1] == "disneyland"
