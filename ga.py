#!/usr/bin/env python
# -*- coding: utf-8 -*-

import numpy as np


class Individual(object):

    def __init__(self, ga_info, rng, source=None):
        self.ga_info = ga_info
        self.rng = rng
        self.gene = np.zeros(self.ga_info.target_length).astype(int)
        self.eval = None
        if source is None:
            self.init_gene()
        else:
            self.copy(source)

    def init_gene(self):
        # every character drawn uniformly from the character range
        self.gene[:] = self.ga_info.char_min + self.rng.randint(self.ga_info.char_num, size=len(self.gene))

    def mutation(self, mutation_rate=0.01):
        # one independent draw in (0, 1] per position, so rate 0 never fires and rate 1 always does
        draws = 1.0 - self.rng.rand(len(self.gene))
        mutated = draws <= mutation_rate
        mutation_num = int(mutated.sum())
        self.gene[mutated] = self.ga_info.char_min + self.rng.randint(self.ga_info.char_num, size=mutation_num)
        return mutation_num

    def match_count(self):
        return int(np.count_nonzero(self.gene == self.ga_info.target_gene))

    def fitness(self):
        return self.match_count() / self.ga_info.target_length

    def is_solution(self):
        return self.match_count() == self.ga_info.target_length

    def copy(self, source):
        self.ga_info = source.ga_info
        self.gene = source.gene.copy()
        self.eval = source.eval

    def decode(self):
        return ''.join(chr(c) for c in self.gene)

    def display(self):
        # printable ASCII as is, everything else as an escape, so a report stays on one ASCII line
        return self.decode().encode('unicode_escape').decode('ascii')


# Single-lineage hill climbing: every generation the whole population is a
# mutated copy of the previous best individual.
class GA(object):

    def __init__(self, ga_info, rng, verbose=True):
        self.ga_info = ga_info
        self.rng = rng
        self.verbose = verbose

        # every slot starts from the same random seed individual
        seed = Individual(ga_info, rng)
        self.pop = [seed] + [Individual(ga_info, rng, source=seed) for _ in range(self.ga_info.population_size - 1)]

        self.num_gen = 0
        self.num_mutation = []
        self.best_arg = 0

    def _evaluation(self, pop):
        evaluations = np.zeros(len(pop))
        for i in range(len(pop)):
            pop[i].eval = pop[i].fitness()
            evaluations[i] = pop[i].eval
        return evaluations

    def highest_scoring(self):
        # argmax returns the first maximum, so the lowest index wins ties
        evaluations = self._evaluation(self.pop)
        best_arg = int(evaluations.argmax())
        return best_arg, evaluations[best_arg]

    def _log_data(self):
        best = self.pop[self.best_arg]
        return '%s  |  %g' % (best.display(), best.eval)

    def evolution(self, max_gen=None):
        while max_gen is None or self.num_gen < max_gen:
            self.num_gen += 1

            # reproduction
            self.num_mutation = [ind.mutation(self.ga_info.mutation_chance) for ind in self.pop]

            # selection
            self.best_arg, _ = self.highest_scoring()
            best = self.pop[self.best_arg]

            # display
            if self.verbose:
                print(self._log_data())

            if best.is_solution():
                break

            # collapse the population onto the best individual
            for i in range(len(self.pop)):
                if i != self.best_arg:
                    self.pop[i].copy(best)

        return self.pop[self.best_arg]
