from contextlib import ContextDecorator
from sqlalchemy import event


class QueryCounter(ContextDecorator):
    """Count SQL statements executed on a SQLAlchemy engine within a scope."""

    def __init__(self, engine):
        self.engine = engine
        self.count = 0
        self.statements = []
        self._enabled = False

    def _before_cursor_execute(self, conn, cursor, statement, parameters, context, executemany):
        self.count += 1
        self.statements.append(statement)

    def __enter__(self):
        if self.engine is not None:
            event.listen(self.engine, 'before_cursor_execute', self._before_cursor_execute)
            self._enabled = True
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._enabled:
            event.remove(self.engine, 'before_cursor_execute', self._before_cursor_execute)
            self._enabled = False
        return False
