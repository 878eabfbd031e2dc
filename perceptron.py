#!/usr/bin/env python
# -*- coding: utf-8 -*-

import numpy as np


class LengthMismatchError(ValueError):
    def __init__(self, expected, actual):
        super(LengthMismatchError, self).__init__('input length %d does not match weight length %d' % (actual, expected))
        self.expected = expected
        self.actual = actual


# weighted sum of the input (bias input included)
def predict(inputs, weights):
    if len(inputs) != len(weights):
        raise LengthMismatchError(len(weights), len(inputs))
    return float(np.dot(np.asarray(inputs, dtype=float), np.asarray(weights, dtype=float)))


# step function, inclusive at zero
def activation(x):
    return 1.0 if x >= 0.0 else 0.0


def model_input(a, b):
    return [1.0, a, b]


def classify(weights, dataset):
    return [activation(predict(model_input(a, b), weights)) for a, b, _ in dataset]


# no activation here so the points keep moving between generations in the plot
def raw_predictions(weights, dataset):
    return [predict(model_input(a, b), weights) for a, b, _ in dataset]
