"""Domain enumerations."""

import enum


class AlgorithmType(str, enum.Enum):
    ASTAR = "astar"
    IDDFS = "iddfs"
