"""
Super Over - cricket shot outcome prediction and Super Over simulation
"""
from superover.container import ServiceContainer
from superover.engine import OutcomeEngine, SuperOverSimulator

__version__ = "0.1.0"

__all__ = ["ServiceContainer", "OutcomeEngine", "SuperOverSimulator", "__version__"]
