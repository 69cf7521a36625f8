import pytest

from feedforward.cli import main, parse_args


def test_parse_args_defaults():
    args = parse_args([])

    assert args.sizes == [9, 4, 9]
    assert args.trials == 100
    assert args.xor is False


def test_parse_args_lists():
    args = parse_args(["--sizes", "2,3,1", "--input", "1,0.5", "--expected", "1"])

    assert args.sizes == [2, 3, 1]
    assert args.input == [1.0, 0.5]
    assert args.expected == [1.0]


def test_parse_args_rejects_garbage():
    with pytest.raises(SystemExit):
        parse_args(["--sizes", "two,three"])


def test_main_prints_network(capsys):
    main(["--sizes", "2,3,1", "--input", "1,0", "--expected", "1", "--trials", "20"])

    out = capsys.readouterr().out
    assert "1.0 -> " in out
    assert "Error" in out
    assert "Layer 0 -> 1" in out
    assert "Layer 1 -> 2" in out


def test_main_rejects_inconsistent_config():
    with pytest.raises(SystemExit):
        main(["--sizes", "2,1", "--input", "1", "--expected", "1"])


def test_main_xor(capsys):
    main(["--xor", "--epochs", "50", "--learning-rate", "0.5"])

    out = capsys.readouterr().out
    assert "Final epoch error" in out
    assert "(expected 0.0)" in out


@pytest.mark.parametrize(
    "argv",
    [
        ["--xor", "--hidden", "0", "--epochs", "5"],
        ["--xor", "--epochs", "0"],
        ["--xor", "--learning-rate", "-0.5", "--epochs", "5"],
        ["--xor", "--weight-min", "1", "--weight-max", "-1", "--epochs", "5"],
    ],
)
def test_main_xor_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit):
        main(argv)
