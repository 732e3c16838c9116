"""Counterexample processing strategies for L*."""

from typing import Union

from .base_processor import CounterexampleProcessor, CounterexampleStrategy
from .angluin import AngluinProcessor
from .maler_pnueli import MalerPnueliProcessor
from .rivest_schapire import RivestSchapireProcessor

PROCESSORS = {
    CounterexampleStrategy.ANGLUIN: AngluinProcessor,
    CounterexampleStrategy.MALER_PNUELI: MalerPnueliProcessor,
    CounterexampleStrategy.RIVEST_SCHAPIRE: RivestSchapireProcessor,
}


def get_processor(strategy: Union[str, CounterexampleStrategy]) -> CounterexampleProcessor:
    """
    Factory for counterexample processors.

    Raises:
        ValueError: If strategy is unknown
    """
    return PROCESSORS[CounterexampleStrategy.parse(strategy)]()


__all__ = [
    "CounterexampleProcessor",
    "CounterexampleStrategy",
    "AngluinProcessor",
    "MalerPnueliProcessor",
    "RivestSchapireProcessor",
    "PROCESSORS",
    "get_processor",
]
