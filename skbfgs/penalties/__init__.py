from .base import BaseSmoothPenalty
from .smooth import Ridge
from .tuning import TuningParametersEnet


__all__ = [BaseSmoothPenalty, Ridge, TuningParametersEnet]
