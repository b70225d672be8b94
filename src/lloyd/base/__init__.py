"""Base classes and interfaces for Lloyd clustering."""

from .interfaces import (
    AssignmentStrategy,
    ParameterUpdater,
    DistanceMetric,
    InitializationStrategy,
    ConvergenceCriterion,
    ClusteringObjective
)

from .data_structures import (
    KMeansParams,
    ClusterPartition,
    IterationRecord,
    ClusteringResult,
    RunState
)

from .clustering_base import BaseClusteringAlgorithm

__all__ = [
    # Interfaces
    'AssignmentStrategy',
    'ParameterUpdater',
    'DistanceMetric',
    'InitializationStrategy',
    'ConvergenceCriterion',
    'ClusteringObjective',

    # Data structures
    'KMeansParams',
    'ClusterPartition',
    'IterationRecord',
    'ClusteringResult',
    'RunState',

    # Base algorithm
    'BaseClusteringAlgorithm'
]
