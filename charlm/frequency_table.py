"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""

import numpy as np


class CharCount:
    def __init__(self, character, count=1):
        self.character = character
        # number of times the character followed the context
        self.count = count
        # probability, set by normalize()
        self.p = 0.0
        # cumulative probability, set by normalize()
        self.cp = 0.0

    def __str__(self):
        return f"({self.character} {self.count} {self.p} {self.cp})"

    def __repr__(self):
        return f"({self.character} {self.count} {self.p} {self.cp})"


class CharDistribution:
    """The characters observed after one context window, with their counts.

    Entries are kept in first-observation order. New characters are appended
    at the end and never reordered, since that order drives the cumulative
    probabilities used by sample().
    """

    def __init__(self):
        self.entries = []

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __str__(self):
        return "(" + " ".join(str(entry) for entry in self.entries) + ")"

    def __repr__(self):
        return str(self)

    def get(self, index):
        return self.entries[index]

    def index_of(self, character):
        for i, entry in enumerate(self.entries):
            if entry.character == character:
                return i
        return -1

    def total_count(self):
        return sum(entry.count for entry in self.entries)

    def update(self, character):
        idx = self.index_of(character)
        if idx == -1:
            self.entries.append(CharCount(character))
        else:
            self.entries[idx].count += 1

    def normalize(self):
        # p and cp are derived from the counts only, so calling this twice is harmless
        counts = np.array([entry.count for entry in self.entries], dtype=float)
        probs = counts / counts.sum()
        cumulative = np.cumsum(probs)
        for entry, p, cp in zip(self.entries, probs, cumulative):
            entry.p = float(p)
            entry.cp = float(cp)

    def sample(self, random_unit):
        assert self.entries, "cannot sample from an empty distribution"
        for entry in self.entries:
            if entry.cp > random_unit:
                return entry.character
        # the last cp may round to slightly less than 1.0
        return self.entries[-1].character
