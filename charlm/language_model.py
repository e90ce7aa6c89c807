"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""

from itertools import islice
from numbers import Integral

import numpy as np

from charlm.frequency_table import CharDistribution


class LanguageModelError(Exception):
    pass


class InvalidWindowLengthError(LanguageModelError, ValueError):
    def __init__(self, window_length):
        super().__init__(f"window length must be a positive integer, got {window_length!r}")
        self.window_length = window_length


class InsufficientInputError(LanguageModelError):
    def __init__(self, window_length, received):
        super().__init__(
            f"corpus too short: needs at least {window_length} characters, got {received}"
        )
        self.window_length = window_length
        self.received = received


class LanguageModel:
    """Fixed-order character Markov model.

    Maps every window of window_length characters seen in the training text
    to the distribution of the characters that followed it.

    Calling train() several times accumulates counts into the same table,
    it never starts over. Use clear_memory() for a fresh table. Note that
    generation after several training passes depends on all of them.
    """

    def __init__(self, window_length, seed=None):
        if isinstance(window_length, bool) or not isinstance(window_length, Integral) or window_length <= 0:
            raise InvalidWindowLengthError(window_length)
        self.window_length = int(window_length)
        self.seed = seed
        # seed None draws from system entropy
        self.random_generator = np.random.default_rng(seed)
        self.char_data_map = {}

    def clear_memory(self):
        self.char_data_map = {}

    def train(self, source):
        """Builds the table from a character source (any iterable of characters).

        The source is consumed once. Raises InsufficientInputError when it
        yields fewer than window_length characters.
        """
        chars = iter(source)
        window = "".join(islice(chars, self.window_length))
        if len(window) < self.window_length:
            raise InsufficientInputError(self.window_length, len(window))

        for ch in chars:
            probs = self.char_data_map.get(window)
            if probs is None:
                probs = CharDistribution()
                self.char_data_map[window] = probs
            probs.update(ch)
            window = window[1:] + ch

        for probs in self.char_data_map.values():
            self.calculate_probabilities(probs)

    @staticmethod
    def calculate_probabilities(probs):
        probs.normalize()

    def get_random_char(self, probs):
        return probs.sample(self.random_generator.random())

    def generate(self, initial_text, text_length):
        """Generates text from the trailing window of initial_text.

        The result starts with that window only, not the whole initial_text.
        Generation stops early when the current window was never seen in
        training. An initial_text shorter than the window is returned as is.
        """
        if len(initial_text) < self.window_length:
            return initial_text

        window = initial_text[-self.window_length:]
        generated_text = window
        for _ in range(text_length):
            probs = self.char_data_map.get(window)
            if probs is None:
                return generated_text
            generated_text = generated_text + self.get_random_char(probs)
            window = generated_text[-self.window_length:]
        return generated_text

    def __str__(self):
        lines = [f"{key} : {probs}\n" for key, probs in self.char_data_map.items()]
        return "".join(lines)

    def show_table_structure(self):
        print(f"window length: {self.window_length}")
        print(f"seed: {self.seed if self.seed is not None else 'system entropy'}")
        print(f"number of windows: {len(self.char_data_map)}")
        if not self.char_data_map:
            return
        sizes = [len(probs) for probs in self.char_data_map.values()]
        print(f"min successors: {min(sizes)}, max: {max(sizes)}")
        total = sum(probs.total_count() for probs in self.char_data_map.values())
        print(f"observed transitions: {total}")
        print(f"average nb of successors per window: {sum(sizes) / len(sizes)}")
