"""Teacher components for L*."""

from .bfs_oracle import BFSOracle
from .teacher import Teacher, DFATeacher, PredicateTeacher

__all__ = ["BFSOracle", "Teacher", "DFATeacher", "PredicateTeacher"]
