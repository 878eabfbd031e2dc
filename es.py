#!/usr/bin/env python
# -*- coding: utf-8 -*-

import contextlib
import csv
import time
import numpy as np

from es_config import FitnessEvaluation


class Individual(object):

    def __init__(self, weights, eval=None):
        # weights are replaced between generations, never written in place
        self.weights = np.array(weights, dtype=float)
        self.weights.setflags(write=False)
        self.eval = eval

    def __repr__(self):
        return 'Individual(%s, eval=%r)' % (self.weights.tolist(), self.eval)


# Perceptron weights evolved with a truncation-selection ES:
#   each generation the population is ranked by fitness (lower is better),
#   the best elite_num individuals survive unchanged and every other individual
#   is perturbed component-wise by uniform noise in [-mutation_bound, mutation_bound].
class ElitistES(object):

    def __init__(self, net_info, eval_func, rng=None):
        self.net_info = net_info
        self.eval_func = eval_func
        self.rng = rng if rng is not None else np.random.default_rng(net_info.seed)
        self.pop = self.init_population()
        self.best = None

        self.num_gen = 0
        self.num_eval = 0
        self._start_time = time.perf_counter()

    def init_population(self):
        weights = self.rng.uniform(self.net_info.init_low, self.net_info.init_high,
                                   size=(self.net_info.pop_size, self.net_info.weight_num))
        return [Individual(w) for w in weights]

    def _evaluation(self, pop):
        evaluations = self.eval_func([ind.weights for ind in pop])
        self.num_eval += len(pop)
        return evaluations

    def rank(self, pop):
        # one evaluation per individual, then sort on the cached values
        evaluations = self._evaluation(pop)
        order = np.argsort(evaluations, kind='stable')
        return [Individual(pop[i].weights, float(evaluations[i])) for i in order]

    def advance(self, ranked):
        elite_num = self.net_info.elite_num
        bound = self.net_info.mutation_bound

        next_pop = list(ranked[:elite_num])
        rest = ranked[elite_num:]
        if rest:
            noise = self.rng.uniform(-bound, bound, size=(len(rest), self.net_info.weight_num))
            next_pop += [Individual(ind.weights + n) for ind, n in zip(rest, noise)]
        return next_pop

    def _log_data(self):
        log_list = [self.num_gen, self.num_eval, time.perf_counter() - self._start_time, self.best.eval]
        log_list += self.best.weights.tolist()
        return log_list

    # With iterations == 0 no generation runs and no monitor is called: the
    # initial population is ranked once and its best individual is returned.
    # The log file then stays empty.
    def evolution(self, iterations=None, monitors=(), log_file=None):
        if iterations is None:
            iterations = self.net_info.iterations

        with contextlib.ExitStack() as stack:
            writer = None
            if log_file is not None:
                fw = stack.enter_context(open(log_file, 'w', newline=''))
                writer = csv.writer(fw, lineterminator='\n')

            ranked = None
            for gen in range(iterations):
                self.num_gen = gen
                ranked = self.rank(self.pop)
                self.best = ranked[0]

                for monitor in monitors:
                    monitor(gen, list(ranked))

                # display and save log
                log_data = self._log_data()
                if self.net_info.verbose:
                    print(log_data)
                if writer is not None:
                    writer.writerow(log_data)

                self.pop = self.advance(ranked)

        if ranked is None:
            ranked = self.rank(self.pop)
            self.best = ranked[0]
        return self.best.weights


def run(net_info, monitors=(), log_file=None, rng=None):
    es = ElitistES(net_info, FitnessEvaluation(net_info.dataset), rng=rng)
    return es.evolution(monitors=monitors, log_file=log_file)
