import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import main
from algorithms.FA import FireflyOptions

SMALL_RUN = ["--dimension", "2", "--swarm-size", "8", "--maximum-iterations", "15"]


def _assert_default(parser, option: str, expected) -> None:
    action = parser._option_string_actions.get(option)
    assert action is not None, f"Missing option {option}"
    assert action.default == expected, f"Default for {option} expected {expected!r}, got {action.default!r}"


def test_parser_defaults_follow_firefly_options():
    parser = main.build_parser()
    defaults = FireflyOptions()

    _assert_default(parser, "--swarm-size", defaults.swarm_size)
    _assert_default(parser, "--maximum-iterations", defaults.maximum_iterations)
    _assert_default(parser, "--stuck-run-iterations", defaults.stuck_run_iterations_count)
    _assert_default(parser, "--attractiveness", defaults.attractiveness_coefficient)
    _assert_default(parser, "--light-absorption", defaults.light_absorption_coefficient)
    _assert_default(parser, "--jitter", defaults.movement_jitter_coefficient)
    _assert_default(parser, "--workers", 1)
    _assert_default(parser, "--dimension", 10)


def test_options_from_args_maps_every_field():
    args = main.build_parser().parse_args([
        "--swarm-size", "9",
        "--maximum-iterations", "11",
        "--stuck-run-iterations", "3",
        "--attractiveness", "0.5",
        "--light-absorption", "0.2",
        "--jitter", "0.01",
        "--in-bounds-seed", "00" * 16,
        "--zero-to-one-seed", "ab" * 16,
        "--workers", "2",
    ])
    options = main.options_from_args(args)

    assert options == FireflyOptions(
        swarm_size=9,
        in_bounds_random_generator_seed=bytes(16),
        zero_to_one_random_generator_seed=b"\xab" * 16,
        maximum_iterations=11,
        stuck_run_iterations_count=3,
        attractiveness_coefficient=0.5,
        light_absorption_coefficient=0.2,
        movement_jitter_coefficient=0.01,
        workers=2,
    )


def test_main_reports_each_problem(capsys):
    exit_code = main.main(["--problems", "sphere", "rastrigin", *SMALL_RUN])
    out = capsys.readouterr().out.splitlines()

    assert exit_code == 0
    assert out[0].startswith("[01/02|sphere] ")
    assert "Minimum: " in out[0] and out[0].endswith("seconds)")
    assert out[1].startswith("[02/02|rastrigin] ")
    assert out[-1].startswith("-- Finished in ")


def test_run_suite_returns_minimum_per_problem(capsys):
    options = FireflyOptions(swarm_size=5, maximum_iterations=5)
    results = main.run_suite(["sphere", "ackley"], 3, options)

    assert set(results) == {"sphere", "ackley"}
    assert all(len(minimum.position) == 3 for minimum in results.values())


def test_unknown_problem_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main.main(["--problems", "does_not_exist", *SMALL_RUN])
    assert excinfo.value.code == 2
    assert "does_not_exist" in capsys.readouterr().err


def test_malformed_seed_is_a_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main.main(["--in-bounds-seed", "1234", *SMALL_RUN])
    assert excinfo.value.code == 2


def test_invalid_option_value_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main.main(["--problems", "sphere", "--dimension", "2", "--swarm-size", "0"])
    assert excinfo.value.code == 2
    assert "swarm_size" in capsys.readouterr().err


def test_log_dir_receives_log_file(tmp_path):
    exit_code = main.main(["--problems", "sphere", "--log-level", "INFO", "--log-dir", str(tmp_path), *SMALL_RUN])
    assert exit_code == 0
    assert (tmp_path / "firefly_logs.log").exists()


def test_unknown_log_level_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main.main(["--problems", "sphere", "--log-level", "LOUD", *SMALL_RUN])
    assert excinfo.value.code == 2
    assert "LOUD" in capsys.readouterr().err


def test_zero_dimension_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main.main(["--problems", "sphere", "--dimension", "0", "--swarm-size", "8"])
    assert excinfo.value.code == 2
    assert "--dimension" in capsys.readouterr().err
