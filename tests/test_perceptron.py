import pytest

from es_config import AND_DATA, OR_DATA
from perceptron import LengthMismatchError, activation, classify, model_input, predict, raw_predictions


def test_predict_is_dot_product():
    assert predict([1.0, 2.0, -3.0], [0.5, 0.25, 2.0]) == pytest.approx(0.5 + 0.5 - 6.0)
    assert predict([1.0, 0.0, 0.0], [-1.5, 1.0, 1.0]) == -1.5


@pytest.mark.parametrize('inputs, weights', [
    ([1.0, 1.0], [0.1, 0.2, 0.3]),
    ([1.0, 1.0, 1.0, 1.0], [0.1, 0.2, 0.3]),
    ([], [0.1]),
])
def test_predict_length_mismatch(inputs, weights):
    with pytest.raises(LengthMismatchError) as excinfo:
        predict(inputs, weights)
    assert excinfo.value.expected == len(weights)
    assert excinfo.value.actual == len(inputs)
    assert str(len(weights)) in str(excinfo.value)


def test_length_mismatch_is_value_error():
    with pytest.raises(ValueError):
        predict([1.0, 1.0], [1.0, 1.0, 1.0])


def test_activation_boundary():
    assert activation(0.0) == 1.0
    assert activation(-0.0) == 1.0
    assert activation(-1e-12) == 0.0
    assert activation(-3.0) == 0.0
    assert activation(2.5) == 1.0


def test_model_input_puts_bias_first():
    assert model_input(0.0, 1.0) == [1.0, 0.0, 1.0]


def test_classify_and():
    assert classify([-1.5, 1.0, 1.0], AND_DATA) == [1.0, 0.0, 0.0, 0.0]


def test_classify_or():
    assert classify([-0.5, 1.0, 1.0], OR_DATA) == [1.0, 1.0, 1.0, 0.0]


def test_raw_predictions_are_not_activated():
    assert raw_predictions([-1.5, 1.0, 1.0], AND_DATA) == pytest.approx([0.5, -0.5, -0.5, -1.5])


def test_predict_keyword_arguments():
    assert predict(inputs=[1.0, 1.0, 1.0], weights=[-1.5, 1.0, 1.0]) == pytest.approx(0.5)
