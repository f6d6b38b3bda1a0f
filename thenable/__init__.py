from .combinators import AggregateError, all_of, all_settled, any_of, race
from .promise import (
    FULFILLED,
    PENDING,
    REJECTED,
    ChainingCycleError,
    Promise,
    PromiseException,
)
from .scheduler import AsyncioScheduler, TaskQueue, get_scheduler, run, set_scheduler

__version__ = '0.1.0'

__all__ = [
    'AggregateError',
    'AsyncioScheduler',
    'ChainingCycleError',
    'FULFILLED',
    'PENDING',
    'Promise',
    'PromiseException',
    'REJECTED',
    'TaskQueue',
    'all_of',
    'all_settled',
    'any_of',
    'get_scheduler',
    'race',
    'run',
    'set_scheduler',
]
