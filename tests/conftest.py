import matplotlib
matplotlib.use('Agg')

import numpy as np
import pytest

from es_config import PerceptronInfo


@pytest.fixture
def rng():
    return np.random.default_rng(2016)


@pytest.fixture
def small_info():
    return PerceptronInfo(op='AND', pop_size=20, elite_num=3, mutation_bound=0.05, iterations=5,
                          seed=7, verbose=False)
