import dataclasses

import numpy as np
import pandas as pd
import pytest

from backprop_net import NeuralNetwork
from backprop_net.pipeline import (
    PipelineConfig,
    evaluate_accuracy,
    load_dataset,
    main,
    parse_args,
    run_pipeline,
)


@pytest.fixture
def csv_path(tmp_path):
    rng = np.random.default_rng(0)
    centers = np.array([[0.1, 0.1], [0.9, 0.1], [0.5, 0.9]])
    rows = []
    for label, center in enumerate(centers):
        points = center + rng.normal(scale=0.05, size=(20, 2))
        for x1, x2 in points:
            one_hot = [1.0 if i == label else 0.0 for i in range(3)]
            rows.append([x1, x2] + one_hot)
    df = pd.DataFrame(rows, columns=["x1", "x2", "a", "b", "c"])
    path = tmp_path / "data.csv"
    df.to_csv(path, index=False)
    return path


def test_load_dataset(csv_path):
    X, y = load_dataset(csv_path, 3)
    assert X.shape == (60, 2)
    assert y.shape == (60, 3)
    np.testing.assert_array_equal(y.sum(axis=1), np.ones(60))


@pytest.mark.parametrize("num_labels", [0, 5])
def test_load_dataset_rejects_bad_label_count(csv_path, num_labels):
    with pytest.raises(ValueError):
        load_dataset(csv_path, num_labels)


def test_evaluate_accuracy():
    labels = np.array([[1, 0, 0], [0, 1, 0], [0, 0, 1], [0, 1, 0]], dtype=float)
    predictions = np.array([
        [0.9, 0.1, 0.2],
        [0.2, 0.7, 0.1],
        [0.6, 0.3, 0.4],
        [0.1, 0.8, 0.3],
    ])
    assert evaluate_accuracy(predictions, labels) == 0.75


def test_run_pipeline(csv_path, tmp_path):
    cfg = PipelineConfig(
        data_path=str(csv_path),
        num_epochs=3000,
        learning_rate=0.3,
        seed=1,
        log_every=0,
        model_dir=str(tmp_path / "model"),
    )
    network, accuracy = run_pipeline(cfg)
    assert isinstance(network, NeuralNetwork)
    assert network.config.input_neurons == 2
    assert network.config.output_neurons == 3
    assert accuracy >= 0.8
    assert (tmp_path / "model" / "parameters.pkl").exists()


def test_parse_args_overrides_defaults(csv_path):
    cfg = parse_args([str(csv_path), "--epochs", "10", "--lr", "0.1", "--seed", "4"])
    assert cfg.data_path == str(csv_path)
    assert cfg.num_epochs == 10
    assert cfg.learning_rate == 0.1
    assert cfg.seed == 4
    assert cfg.hidden_neurons == PipelineConfig().hidden_neurons


def test_main_reports_accuracy(csv_path, capsys):
    code = main([str(csv_path), "--epochs", "50", "--seed", "2", "--log_every", "0"])
    assert code == 0
    assert "Accuracy = " in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.csv")]) == 1


def test_main_invalid_config(csv_path):
    assert main([str(csv_path), "--epochs", "0"]) == 1


def test_pipeline_config_is_immutable():
    cfg = PipelineConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.num_epochs = 10
