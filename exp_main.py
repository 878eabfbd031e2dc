#!/usr/bin/env python
# -*- coding: utf-8 -*-

import argparse
import pandas as pd

from es import run
from es_config import PerceptronInfo, op_set
from es_monitor import PlotMonitor
from perceptron import classify


def get_parser():
    parser = argparse.ArgumentParser(description='Evolving perceptron weights for a boolean operator')
    parser.add_argument('--op', '-o', choices=op_set.keys(), default='AND', help='Boolean operator to learn (AND or OR)')
    parser.add_argument('--pop_size', '-n', type=int, default=500, help='Num. of individuals')
    parser.add_argument('--elite_num', '-e', type=int, default=10, help='Num. of elites kept unchanged')
    parser.add_argument('--mutation_bound', '-d', type=float, default=0.005, help='Max. perturbation per weight')
    parser.add_argument('--iterations', '-i', type=int, default=100, help='Num. of generations')
    parser.add_argument('--seed', '-s', type=int, default=None, help='Random seed')
    parser.add_argument('--log_file', default=None, help='Log file name (CSV, one row per generation)')
    parser.add_argument('--plot_file', default=None, help='Plot file name')
    parser.add_argument('--quiet', '-q', action='store_true', help='Do not print per-generation rows')
    parser.add_argument('--mode', '-m', default='train', help='Mode (train / report)')
    return parser


def train(args):
    net_info = PerceptronInfo(op=args.op, pop_size=args.pop_size, elite_num=args.elite_num,
                              mutation_bound=args.mutation_bound, iterations=args.iterations,
                              seed=args.seed, verbose=not args.quiet)

    monitors = []
    plot = None
    if args.plot_file:
        plot = PlotMonitor(net_info.dataset)
        monitors.append(plot)

    best = run(net_info, monitors=monitors, log_file=args.log_file)

    if plot is not None:
        plot.save(args.plot_file)

    print('best weights: %s' % best.tolist())
    for (a, b, _), y in zip(net_info.dataset, classify(best, net_info.dataset)):
        print('%g %s %g = %g' % (a, args.op, b, y))
    return best


# Summary of a log written by ElitistES.evolution
def report(args):
    try:
        data = pd.read_csv(args.log_file, header=None)
    except pd.errors.EmptyDataError:
        # no generation was run
        print('generations: 0')
        print('first perfect generation: none')
        print('final best fitness: none')
        print('final best weights: none')
        return pd.DataFrame()

    solved = data[data[3] == 0]
    final = data.tail(1).values.flatten()

    print('generations: %d' % len(data))
    if len(solved) > 0:
        print('first perfect generation: %d' % int(solved.iloc[0, 0]))
    else:
        print('first perfect generation: none')
    print('final best fitness: %g' % final[3])
    print('final best weights: %s' % final[4:].tolist())
    return data


def main(argv=None):
    args = get_parser().parse_args(argv)

    if args.mode == 'train':
        return train(args)
    elif args.mode == 'report':
        if not args.log_file:
            print('--log_file is required in report mode')
            return None
        return report(args)
    else:
        print('Undefined mode.')
        return None


if __name__ == '__main__':
    main()
