import logging

from .scheduler import get_scheduler

logger = logging.getLogger(__name__)

PENDING = 'pending'
FULFILLED = 'fulfilled'
REJECTED = 'rejected'


class PromiseException(Exception):
    '''Raise from a handler to reject with an arbitrary, non-exception value.'''

    def __init__(self, value):
        super().__init__(value)
        self.value = value

    def __str__(self):
        return repr(self.value)


class ChainingCycleError(TypeError):
    pass


def get_then(value):
    # classes expose then as a plain function, they are not thenables
    if isinstance(value, type):
        return None
    then = getattr(value, 'then', None)
    return then if callable(then) else None


def adoption_chain(promise):
    while promise is not None:
        yield promise
        promise = promise.adopting


def resolving_functions(promise, adopted=()):
    called = False

    def resolve(value):
        nonlocal called
        if called:
            return
        called = True
        resolve_promise(promise, value, adopted)

    def reject(reason):
        nonlocal called
        if called:
            return
        called = True
        settle(promise, REJECTED, reason)

    return resolve, reject


def resolve_promise(promise, value, adopted=()):
    # adopted holds the foreign thenables this resolution already follows
    if any(t is value for t in adopted) or (
            isinstance(value, Promise) and any(p is promise for p in adoption_chain(value))):
        logger.debug('Chaining cycle detected while resolving %r', promise)
        settle(promise, REJECTED, ChainingCycleError('Chaining cycle detected for promise'))
        return

    try:
        then = get_then(value)
    except Exception as e:
        settle(promise, REJECTED, e)
        return

    if then is None:
        settle(promise, FULFILLED, value)
        return

    if isinstance(value, Promise):
        promise.adopting = value
        resolve, reject = resolving_functions(promise)
    else:
        resolve, reject = resolving_functions(promise, adopted + (value,))
    try:
        then(resolve, reject)
    except PromiseException as e:
        reject(e.value)
    except Exception as e:
        reject(e)


def settle(promise, state, result):
    promise.state = state
    promise.result = result
    promise.adopting = None
    logger.debug('Settled %r', promise)

    jobs, promise.jobs = promise.jobs, []
    for job in jobs:
        schedule_job(promise, job)


def schedule_job(promise, job):
    promise.scheduler(lambda: execute_job(promise, job))


def execute_job(promise, job):
    if promise.state == FULFILLED:
        handler, passthrough = job['on_fulfilled'], job['resolve']
    else:
        handler, passthrough = job['on_rejected'], job['reject']

    if not callable(handler):
        passthrough(promise.result)
        return

    try:
        value = handler(promise.result)
    except PromiseException as e:
        job['reject'](e.value)
        return
    except Exception as e:
        job['reject'](e)
        return

    job['resolve'](value)


class Promise:
    def __init__(self, fn, scheduler=None):
        if not callable(fn):
            raise TypeError('Promise initializer must be callable, got %r' % (fn,))

        self.state = PENDING
        self.result = None
        self.jobs = []
        self.adopting = None
        self.scheduler = scheduler if scheduler is not None else get_scheduler()

        resolve, reject = resolving_functions(self)
        try:
            fn(resolve, reject)
        except PromiseException as e:
            reject(e.value)
        except Exception as e:
            reject(e)

    def __repr__(self):
        if self.state == PENDING:
            return '<Promise pending>'
        return '<Promise %s: %r>' % (self.state, self.result)

    @staticmethod
    def resolve(value, scheduler=None):
        if isinstance(value, Promise) and (scheduler is None or scheduler is value.scheduler):
            return value
        return Promise(lambda resolve, reject: resolve(value), scheduler)

    @staticmethod
    def reject(reason, scheduler=None):
        return Promise(lambda resolve, reject: reject(reason), scheduler)

    def then(self, on_fulfilled=None, on_rejected=None):
        job = {
            'on_fulfilled': on_fulfilled,
            'on_rejected': on_rejected,
        }

        def bind(resolve, reject):
            job['resolve'] = resolve
            job['reject'] = reject

        promise = Promise(bind, self.scheduler)
        if self.state == PENDING:
            self.jobs.append(job)
        else:
            schedule_job(self, job)
        return promise

    def catch(self, on_rejected):
        return self.then(None, on_rejected)
