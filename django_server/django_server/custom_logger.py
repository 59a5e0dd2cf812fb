import logging
import threading

# Records from these loggers are never written to the database, otherwise
# saving a LogMessage could log again and recurse.
IGNORED_LOGGER_NAMES = frozenset([
    'django.db',
    'django.db.backends',
    'django.db.backends.schema',
    'django.db.backends.sqlite3',
    'django.db.backends.postgresql',
    'sqlite3',
    'psycopg',
    'psycopg2',
    'urllib3',
    'requests',
    'django_server.custom_logger',
])


class DatabaseLogHandler(logging.Handler):
    """
    Persists log records as LogMessage rows so warnings and errors can be
    inspected in the admin after the fact.

    The resource a record belongs to is taken from ``extra={'resource_id': ...}``.
    Errors while writing are routed to ``handleError`` and never reach the caller.
    """

    _is_emitting = threading.local()

    def __init__(self, level=logging.NOTSET):
        super().__init__(level)

    def _should_ignore_record(self, record: logging.LogRecord) -> bool:
        if getattr(DatabaseLogHandler._is_emitting, 'value', False):
            return True

        return any(record.name == ignored or record.name.startswith(f'{ignored}.') for ignored in IGNORED_LOGGER_NAMES)

    def emit(self, record: logging.LogRecord):
        if self._should_ignore_record(record):
            return

        DatabaseLogHandler._is_emitting.value = True
        try:
            from crop_adviser_backend.services.log_message_services import write_log_message

            resource_id = getattr(record, 'resource_id', None)
            write_log_message(record.levelname, self.format(record), resource_id)
        except Exception:
            self.handleError(record)
        finally:
            DatabaseLogHandler._is_emitting.value = False
