'''Aggregate promises built purely on Promise, then and catch.'''

from .promise import FULFILLED, REJECTED, Promise


class AggregateError(Exception):
    def __init__(self, errors, message='All promises rejected'):
        super().__init__(message)
        self.errors = errors


def all_of(promises, scheduler=None):
    def executor(resolve, reject):
        items = list(promises)
        if not items:
            resolve([])
            return

        results = [None] * len(items)
        remaining = len(items)

        def on_fulfilled(index):
            def store(value):
                nonlocal remaining
                results[index] = value
                remaining -= 1
                if remaining == 0:
                    resolve(results)
            return store

        for index, item in enumerate(items):
            Promise.resolve(item, scheduler).then(on_fulfilled(index), reject)

    return Promise(executor, scheduler)


def all_settled(promises, scheduler=None):
    def executor(resolve, reject):
        items = list(promises)
        if not items:
            resolve([])
            return

        results = [None] * len(items)
        remaining = len(items)

        def record(index, outcome):
            nonlocal remaining
            results[index] = outcome
            remaining -= 1
            if remaining == 0:
                resolve(results)

        for index, item in enumerate(items):
            Promise.resolve(item, scheduler).then(
                lambda value, index=index: record(index, {'status': FULFILLED, 'value': value}),
                lambda reason, index=index: record(index, {'status': REJECTED, 'reason': reason}),
            )

    return Promise(executor, scheduler)


def race(promises, scheduler=None):
    def executor(resolve, reject):
        for item in promises:
            Promise.resolve(item, scheduler).then(resolve, reject)

    return Promise(executor, scheduler)


def any_of(promises, scheduler=None):
    # empty input never settles
    def executor(resolve, reject):
        items = list(promises)
        errors = [None] * len(items)
        remaining = len(items)

        def on_rejected(index):
            def store(reason):
                nonlocal remaining
                errors[index] = reason
                remaining -= 1
                if remaining == 0:
                    reject(AggregateError(errors))
            return store

        for index, item in enumerate(items):
            Promise.resolve(item, scheduler).then(resolve, on_rejected(index))

    return Promise(executor, scheduler)
