#!/usr/bin/env python
# -*- coding: utf-8 -*-

import argparse
import time
import numpy as np

from ga import GA
from ga_config import GaInfo


def main(argv=None):
    parser = argparse.ArgumentParser(description='Evolve a random string into a target string')
    parser.add_argument('--pause', action='store_true', help='Wait for Enter before exiting')
    # anything else on the command line is ignored
    args, _ = parser.parse_known_args(argv)

    ga_info = GaInfo()
    rng = np.random.RandomState(int(time.time()))

    print('Population Size:', ga_info.population_size)
    print('Mutation Chance: %g%%' % (ga_info.mutation_chance * 100))

    start = time.perf_counter()
    ga = GA(ga_info, rng, verbose=True)
    ga.evolution()
    elapsed_ms = (time.perf_counter() - start) * 1000

    print('Completed in %d generations (%d ms).' % (ga.num_gen, elapsed_ms))

    if args.pause:
        input()
    return 0


if __name__ == '__main__':
    main()
