import logging
import os

DEFAULT_PORT = 3000
DEFAULT_INTERFACE = "0.0.0.0"


def parse_port(value):
    '''
    >>> parse_port('3000')
    3000
    >>> parse_port(' 8080 ')
    8080
    >>> parse_port(5000)
    5000
    >>> parse_port('0')
    Traceback (most recent call last):
    ...
    ValueError: port out of range: 0
    >>> parse_port('65536')
    Traceback (most recent call last):
    ...
    ValueError: port out of range: 65536
    >>> parse_port('http')
    Traceback (most recent call last):
    ...
    ValueError: invalid port: 'http'
    '''
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ValueError("invalid port: {!r}".format(value))
    if not 0 < port < 65536:
        raise ValueError("port out of range: {}".format(port))
    return port


def get_port(environ=None, override=None):
    '''
    Resolve the port to listen on: an explicit override wins, then the
    PORT environment variable, then the default. An empty PORT counts as
    unset.

    >>> get_port({})
    3000
    >>> get_port({'PORT': ''})
    3000
    >>> get_port({'PORT': '5000'})
    5000
    >>> get_port({'PORT': '5000'}, override=23128)
    23128
    '''
    if override is not None:
        return parse_port(override)
    if environ is None:
        environ = os.environ
    value = environ.get('PORT')
    if not value:
        return DEFAULT_PORT
    return parse_port(value)


def get_log_level(environ=None, default="info"):
    '''
    >>> get_log_level({}) == logging.INFO
    True
    >>> get_log_level({'LOG_LEVEL': 'debug'}) == logging.DEBUG
    True
    >>> get_log_level({}, default='WARNING') == logging.WARNING
    True
    >>> get_log_level({'LOG_LEVEL': 'chatty'}) == logging.INFO
    True
    '''
    if environ is None:
        environ = os.environ
    log_level_name = environ.get('LOG_LEVEL', default)
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)
    if not isinstance(log_level, int):
        return logging.INFO
    return log_level
