import logging
import threading


class FakeSession:
    def __init__(self, options):
        self.options = options
        self.handlers = {}
        self.closed = 0

    def on(self, event, handler):
        self.handlers.setdefault(event, []).append(handler)

    def emit(self, event, *args):
        for handler in self.handlers.get(event, []):
            handler(*args)

    def close(self):
        self.closed += 1


class BlockingSession(FakeSession):
    """close() hangs until released"""
    def __init__(self, options):
        super().__init__(options)
        self.release = threading.Event()

    def close(self):
        self.closed += 1
        self.release.wait(10)


class FakeSessionFactory:
    def __init__(self, errors=None, session_class=None):
        self.sessions = []
        self.options = []
        self.errors = list(errors or [])
        self.session_class = session_class or FakeSession

    def __call__(self, options):
        self.options.append(options)
        if self.errors:
            raise self.errors.pop(0)
        session = self.session_class(options)
        self.sessions.append(session)
        return session

    @property
    def last(self) -> FakeSession:
        return self.sessions[-1]


class FakeTimerHandle:
    def __init__(self, delay, async_fn, args):
        self.delay = delay
        self.async_fn = async_fn
        self.args = args
        self.cancelled = False
        self.fired = False

    @property
    def pending(self):
        return not self.fired and not self.cancelled

    def cancel(self):
        self.cancelled = True

    async def fire(self):
        self.fired = True
        await self.async_fn(*self.args)


class FakeTimer:
    def __init__(self):
        self.handles = []

    def start(self, delay, async_fn, *args):
        handle = FakeTimerHandle(delay, async_fn, args)
        self.handles.append(handle)
        return handle


class Terminator:
    def __init__(self):
        self.codes = []

    def __call__(self, code):
        self.codes.append(code)


class FakeProbe:
    def __init__(self, result=None):
        self.calls = []
        self.result = result

    async def __call__(self, host, port, logger):
        self.calls.append((host, port))
        return self.result


class FakeConnect:
    def __init__(self):
        self.calls = 0

    async def __call__(self):
        self.calls += 1


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__(logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)

    @property
    def messages(self):
        return [i.getMessage() for i in self.records]

    def has(self, text):
        return any(text in i for i in self.messages)
