#!/usr/bin/env python
# -*- coding: utf-8 -*-

import numpy as np

from perceptron import activation, model_input, predict


# (a, b, expected)
AND_DATA = ((1.0, 1.0, 1.0),
            (1.0, 0.0, 0.0),
            (0.0, 1.0, 0.0),
            (0.0, 0.0, 0.0))

OR_DATA = ((1.0, 1.0, 1.0),
           (1.0, 0.0, 1.0),
           (0.0, 1.0, 1.0),
           (0.0, 0.0, 0.0))

op_set = {
    'AND': AND_DATA,
    'OR': OR_DATA,
}


def load_dataset(op):
    if op not in op_set:
        raise ValueError('unknown operator %r (expected one of %s)' % (op, ', '.join(op_set)))
    return op_set[op]


# Sum of squared classification errors over the dataset (0 = every example correct)
def evaluate(weights, dataset):
    total_error = 0.0
    for a, b, expected in dataset:
        y = activation(predict(model_input(a, b), weights))
        total_error += (expected - y) ** 2
    return total_error


class FitnessEvaluation(object):
    def __init__(self, dataset):
        self.dataset = dataset

    def __call__(self, weight_lists):
        evaluations = np.zeros(len(weight_lists))
        for i, weights in enumerate(weight_lists):
            evaluations[i] = evaluate(weights, self.dataset)
        return evaluations


class PerceptronInfo(object):
    def __init__(self, op='AND', pop_size=500, elite_num=10, mutation_bound=0.005, iterations=100,
                 init_low=-1.0, init_high=1.0, seed=None, verbose=True):
        # problem
        self.op = op
        self.dataset = load_dataset(op)
        self.input_num = 2
        self.weight_num = self.input_num + 1    # bias + one weight per input

        # evolution strategy
        if pop_size < 1:
            raise ValueError('pop_size must be at least 1, got %d' % pop_size)
        if not 0 <= elite_num <= pop_size:
            raise ValueError('elite_num must be within [0, %d], got %d' % (pop_size, elite_num))
        if mutation_bound < 0:
            raise ValueError('mutation_bound must be non-negative, got %r' % mutation_bound)
        if iterations < 0:
            raise ValueError('iterations must be non-negative, got %d' % iterations)
        self.pop_size = pop_size
        self.elite_num = elite_num
        self.mutation_bound = mutation_bound
        self.iterations = iterations
        self.init_low = init_low
        self.init_high = init_high

        self.seed = seed
        self.verbose = verbose
