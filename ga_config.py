#!/usr/bin/env python
# -*- coding: utf-8 -*-

import numpy as np


class GaInfo(object):
    def __init__(self, population_size=100, target='Computer Science 1944 Cool Topics Project',
                 mutation_chance=0.01, character_range=(0, 256)):
        # population_size: number of individuals mutated per generation
        # target: string the population evolves toward
        # mutation_chance: per-character probability of replacement in [0, 1]
        # character_range: half-open range of character codes drawn on mutation
        #                  (the full byte range, decoded as latin-1 for display)
        if population_size < 1:
            raise ValueError('population_size must be positive, got %d' % population_size)
        if not target:
            raise ValueError('target must not be empty')
        if not 0.0 <= mutation_chance <= 1.0:
            raise ValueError('mutation_chance must be in [0, 1], got %r' % mutation_chance)

        self.population_size = population_size
        self.target = target
        self.mutation_chance = mutation_chance
        self.char_min, self.char_max = character_range
        self.char_num = self.char_max - self.char_min

        # target codes, compared against the gene of every individual
        self.target_gene = np.array([ord(c) for c in target], dtype=int)
        if self.target_gene.min() < self.char_min or self.target_gene.max() >= self.char_max:
            raise ValueError('target contains characters outside the character range')
        self.target_gene.flags.writeable = False
        self.target_length = len(target)
