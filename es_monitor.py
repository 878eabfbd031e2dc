#!/usr/bin/env python
# -*- coding: utf-8 -*-

import matplotlib.pyplot as plt

from perceptron import raw_predictions


# Monitors are called as monitor(generation, ranked_population) once per generation.
# ranked_population is a copy sorted by ascending fitness and must be treated as read-only.


class PlotMonitor(object):
    """Keeps the best fitness of every generation and the raw (un-activated)
    predictions of the latest best individual, and draws them with matplotlib.
    """

    def __init__(self, dataset):
        self.dataset = dataset
        self.best_evals = []
        self.predictions = None
        self.generation = None

    def __call__(self, generation, ranked):
        best = ranked[0]
        self.generation = generation
        self.best_evals.append(best.eval)
        self.predictions = raw_predictions(best.weights, self.dataset)

    def save(self, out_file):
        fig, (ax_points, ax_curve) = plt.subplots(1, 2, figsize=(10, 4.5))

        expected = [e for _, _, e in self.dataset]
        ax_points.scatter(expected, expected, s=80, color=(0, 0, 150 / 255.), label='data')
        if self.predictions is not None:
            ax_points.scatter(self.predictions, self.predictions, s=80, color=(1.0, 100 / 255., 100 / 255.),
                              label='prediction')
        ax_points.axvline(0.0, color='gray', linewidth=0.8, linestyle='--')
        ax_points.set_xlabel('weighted sum')
        ax_points.set_title('Generation %s' % self.generation)
        ax_points.legend(loc='upper left')

        ax_curve.plot(range(len(self.best_evals)), self.best_evals)
        ax_curve.set_xlabel('Generation')
        ax_curve.set_ylabel('Best fitness (squared error)')
        ax_curve.grid(True)

        fig.tight_layout()
        fig.savefig(out_file, dpi=120)
        plt.close(fig)
