import pytest

from ffnet.__main__ import (DEFAULT_LEARNING_RATE, DEFAULT_NUM_EPOCHS, main,
                            parse_arguments)


def test_parse_arguments_defaults():
    args = parse_arguments([])

    assert args.num_epochs == DEFAULT_NUM_EPOCHS == 10000
    assert args.learning_rate == DEFAULT_LEARNING_RATE == 0.01
    assert args.seed is None
    assert args.threshold == 0.5
    assert not args.quiet


@pytest.mark.parametrize("argv", [["--num-epochs", "0"],
                                  ["--learning-rate", "-1"],
                                  ["--threshold", "1.5"],
                                  ["--log-level", "LOUD"]])
def test_parse_arguments_rejects_invalid_values(argv):
    with pytest.raises(SystemExit):
        parse_arguments(argv)


def test_main_prints_progress_and_predictions(capsys):
    args = parse_arguments(["--num-epochs", "2", "--seed", "0"])

    assert main(args) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("Epoch: 0 Loss: ")
    assert out[1].startswith("Epoch: 1 Loss: ")
    assert out[2] == "Input: 0, 0"
    assert out[3].startswith("Output Probability: ")
    assert out[4] in ("Output: 0", "Output: 1")
    assert out[5] == "Expected Output: 0"
    assert out[6] == "----------------------"
    assert len(out) == 2 + 4 * 5


def test_main_quiet(capsys):
    args = parse_arguments(["--num-epochs", "1", "--seed", "0", "--quiet"])

    main(args)

    assert not capsys.readouterr().out.startswith("Epoch")
