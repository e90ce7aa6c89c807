"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""
import re

from charlm.char_source import read_chars
from charlm.language_model import LanguageModel

if __name__ == '__main__':
    lm = LanguageModel(7, seed=20)
    lm.train(read_chars('data/originofspecies.txt'))
    lm.show_table_structure()
    result = lm.generate('Natural selection', 400)
    # Removes spaces before punctuation
    result = re.sub(r"\s([?.!,:;])", r"\1", result)
    print(result)
