"""klaw-sampling: Exact discrete sampling primitives for the Klaw ecosystem.

O(1) weighted index sampling via Walker/Vose alias tables, sorted random
k-subsets (Knuth's Algorithm S) and Fisher-Yates shuffles, all driven by an
explicit uniform random source.

Flat imports (preferred):
    from klaw_sampling import build_table, sample_weighted_index, RandomSource
    from klaw_sampling import sample_subset, shuffle_indices, apply_shuffle

Submodule imports (for organization):
    from klaw_sampling.alias import AliasTable
    from klaw_sampling.errors import InvalidWeights, InvalidWeightsError
    from klaw_sampling.result import Ok, Err, checked
"""

# Configuration
from klaw_sampling._config import SamplingConfig, get_config, init

# Logging
from klaw_sampling._logging import capture_events, configure_logging, get_logger

# Alias tables
from klaw_sampling.alias import AliasTable, build_table, try_build_table

# Errors
from klaw_sampling.errors import (
    InvalidSize,
    InvalidSizeError,
    InvalidWeights,
    InvalidWeightsError,
    LengthMismatch,
    LengthMismatchError,
    SamplingError,
)

# Results
from klaw_sampling.result import Err, Ok, Result, checked, collect

# Shuffling
from klaw_sampling.shuffle import apply_shuffle, shuffle, shuffle_indices

# Sources
from klaw_sampling.source import RandomSource, UniformSource, default_source

# Subsets
from klaw_sampling.subset import sample_subset, sample_subset_of, try_sample_subset

# Uniform choice
from klaw_sampling.uniform import sample, sample_int

# Weighted sampling
from klaw_sampling.weighted import (
    WeightedSampler,
    sample_int_with_weights,
    sample_weighted,
    sample_weighted_index,
    sample_with_weights,
)

__all__ = [
    # Alias tables
    'AliasTable',
    # Results
    'Err',
    # Errors
    'InvalidSize',
    'InvalidSizeError',
    'InvalidWeights',
    'InvalidWeightsError',
    'LengthMismatch',
    'LengthMismatchError',
    'Ok',
    # Sources
    'RandomSource',
    'Result',
    # Configuration
    'SamplingConfig',
    'SamplingError',
    'UniformSource',
    # Weighted sampling
    'WeightedSampler',
    # Shuffling
    'apply_shuffle',
    'build_table',
    # Logging
    'capture_events',
    'checked',
    'collect',
    'configure_logging',
    'default_source',
    'get_config',
    'get_logger',
    'init',
    # Uniform choice
    'sample',
    'sample_int',
    'sample_int_with_weights',
    # Subsets
    'sample_subset',
    'sample_subset_of',
    'sample_weighted',
    'sample_weighted_index',
    'sample_with_weights',
    'shuffle',
    'shuffle_indices',
    'try_build_table',
    'try_sample_subset',
]
