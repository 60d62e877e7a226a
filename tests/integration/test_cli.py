"""Smoke tests for the relm command-line driver."""
import pytest

from relm.cli.main import build_parser, main


def test_ridge_run(capsys):
    code = main(["--dataset", "sine", "--samples", "80", "--hidden", "20", "--seed", "1"])
    out = capsys.readouterr().out
    assert code == 0
    assert "R-ELM Readout" in out
    assert "Intercept     : none" in out
    assert "test MSE" in out


def test_lasso_run(capsys):
    code = main([
        "--dataset", "linear", "--samples", "120", "--features", "4",
        "--hidden", "30", "--alpha", "1", "--regularization", "10",
    ])
    out = capsys.readouterr().out
    assert code == 0
    assert "Intercept     : present" in out


def test_invalid_regularization_returns_error(capsys):
    code = main(["--samples", "40", "--hidden", "10", "--regularization", "-1"])
    assert code == 1
    assert "regularization" in capsys.readouterr().err


def test_unknown_activation_rejected_by_parser():
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["--activation", "relu"])
    assert exc.value.code == 2
