'''Deferred execution for promise handlers.

A scheduler is any callable taking a zero-argument function and arranging
for it to run once, after the current call stack has returned.
'''

import asyncio
import logging
from collections import deque

logger = logging.getLogger(__name__)


class TaskQueue:
    '''FIFO of pending tasks, drained explicitly by calling run().'''

    def __init__(self):
        self.tasks = deque()
        self.running = False

    def __call__(self, fn):
        self.tasks.append(fn)

    schedule = __call__

    def __len__(self):
        return len(self.tasks)

    def run(self):
        if self.running:
            return 0

        self.running = True
        count = 0
        try:
            while self.tasks:
                task = self.tasks.popleft()
                task()
                count += 1
        finally:
            self.running = False
        return count


class AsyncioScheduler:
    def __init__(self, loop=None):
        self.loop = loop

    def __call__(self, fn):
        loop = self.loop if self.loop is not None else asyncio.get_running_loop()
        loop.call_soon(fn)


_scheduler = TaskQueue()


def get_scheduler():
    return _scheduler


def set_scheduler(scheduler):
    global _scheduler
    if not callable(scheduler):
        raise TypeError('scheduler must be callable, got %r' % (scheduler,))
    previous, _scheduler = _scheduler, scheduler
    logger.debug('Default scheduler changed from %r to %r', previous, scheduler)
    return previous


def run():
    '''Drain the default scheduler if it is a TaskQueue.'''
    if isinstance(_scheduler, TaskQueue):
        return _scheduler.run()
    return 0
