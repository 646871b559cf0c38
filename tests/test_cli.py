## mopt — CLI integration tests

import os, sys
import subprocess
from pathlib import Path


def repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def run_cli(*cli_args: str, env: dict | None = None) -> subprocess.CompletedProcess:
    args = [sys.executable, "-m", "mopt", *cli_args]
    merged_env = os.environ.copy()
    merged_env["PYTHONPATH"] = os.pathsep.join(p for p in (str(repo_root() / "src"), merged_env.get("PYTHONPATH")) if p)
    merged_env.pop("MOPT_DEBUG", None)
    merged_env.pop("MOPT_HELP_LEAD", None)
    if env:
        merged_env.update(env)
    return subprocess.run(args, capture_output=True, text=True, env=merged_env)


def _strip_output_lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if line.strip()]


def test_cli_bool_found_and_missing():
    found = run_cli("bool", "v", "--", "prog", "-v")
    assert found.returncode == 0
    assert _strip_output_lines(found.stdout) == ["true"]

    missing = run_cli("bool", "q", "--", "prog", "-v")
    assert missing.returncode == 1
    assert _strip_output_lines(missing.stdout) == ["false"]


def test_cli_string_with_escape_and_default():
    result = run_cli("str", "s", "none", "--", "prog", "-s\\-dashed")
    assert result.returncode == 0
    assert _strip_output_lines(result.stdout) == ["-dashed"]

    result = run_cli("str", "s", "none", "--", "prog", "-s", "-t")
    assert _strip_output_lines(result.stdout) == ["none"]


def test_cli_number_with_negative_default():
    result = run_cli("num", "n", "-1", "--", "prog", "-n", "-222")
    assert result.returncode == 0
    assert _strip_output_lines(result.stdout) == ["-222"]

    result = run_cli("num", "n", "-1", "--", "prog", "-nabc")
    assert _strip_output_lines(result.stdout) == ["-1"]


def test_cli_float():
    result = run_cli("float", "f", "0.5", "--", "prog", "-f2.25")
    assert result.returncode == 0
    assert _strip_output_lines(result.stdout) == ["2.25"]


def test_cli_bitflags_mask_and_names():
    result = run_cli("csf", "F", "4", "x,y,z", "--", "prog", "-Fx,no-z")
    assert result.returncode == 0
    assert _strip_output_lines(result.stdout) == ["1"]

    result = run_cli("csf", "--names", "F", "0", "x,y,z", "--", "prog", "-Fy,z")
    assert _strip_output_lines(result.stdout) == ["y", "z"]


def test_cli_list_prints_one_per_line():
    result = run_cli("list", "--", "prog", "-v", "--", "-a", "b")
    assert result.returncode == 0
    assert _strip_output_lines(result.stdout) == ["-a", "b"]

    result = run_cli("list", "--", "prog", "a", "--")
    assert result.stdout == ""


def test_cli_help_prints_usage_and_exits_zero():
    result = run_cli("--usage", "prog - tests things", "num", "n", "3", "--", "prog", "-h")
    assert result.returncode == 0
    assert result.stdout == "prog purpose, usage & options:\n prog - tests things\n"


def test_cli_help_lead_can_be_replaced():
    result = run_cli("--lead", "uso:", "-u", "texto", "bool", "x", "--", "prog", "-h")
    assert result.returncode == 0
    assert result.stdout == "prog uso: texto\n"

    result = run_cli("-u", "texto", "bool", "x", "--", "prog", "-h", env={"MOPT_HELP_LEAD": "aide:"})
    assert result.stdout == "prog aide: texto\n"


def test_cli_help_topic_is_plain_string_query():
    result = run_cli("str", "h", "-", "--", "prog", "-h", "colors")
    assert result.returncode == 0
    assert _strip_output_lines(result.stdout) == ["colors"]


def test_cli_rejects_long_flag():
    result = run_cli("bool", "vv", "--", "prog", "-vv")
    assert result.returncode == 2
    assert "single option letter" in result.stderr


def test_cli_rejects_mask_out_of_range():
    result = run_cli("csf", "F", str(1 << 32), "x", "--", "prog")
    assert result.returncode == 2


def test_cli_debug_trace_plain():
    result = run_cli("--plain", "num", "n", "0", "--", "prog", "-n5", env={"MOPT_DEBUG": "1"})
    assert result.returncode == 0
    assert "mopt: -n found at position 1 with raw value '5'" in result.stderr
    assert "\033[" not in result.stderr
