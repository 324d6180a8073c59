import logging
logger = logging.getLogger('greeter')

from argparse import ArgumentParser
import os
import sys

from twisted.internet import reactor
from twisted.internet.defer import inlineCallbacks

from .config import DEFAULT_INTERFACE, get_log_level, get_port
from .greeter import make_site
from . import servicemanager


parser = ArgumentParser(prog="greeter", description="""
Run a small HTTP server that answers every request with the same
HTML greeting.
""")
parser.add_argument("-p", "--port", type=str, metavar="PORT",
                    help="port to listen on (default: $PORT, or 3000)")
parser.add_argument("--loglevel", type=str, default="info", metavar="LEVEL")
parser.add_argument("--systemd", action='store_true')

exit_status = 0


@inlineCallbacks
def start_server(interface, port, reactor):
    site = make_site()
    listening_port = yield reactor.listenTCP(port, site, interface=interface)
    servicemanager.notify_ready()
    logger.info("Listening on %s", listening_port.getHost().port)
    return listening_port


@inlineCallbacks
def main(args):
    global exit_status
    try:
        logger.info("Starting greeter on %s:%s", DEFAULT_INTERFACE, args.port)
        yield start_server(DEFAULT_INTERFACE, args.port, reactor)
    except Exception as e:
        # no retry and no fallback port: failing to bind is fatal
        logger.error("Problem starting the server", exc_info=True)
        exit_status = 1
        reactor.stop()


def run(argv=None):
    args = parser.parse_args(argv)
    try:
        args.port = get_port(os.environ, args.port)
    except ValueError as e:
        parser.error(str(e))

    log_level = get_log_level(os.environ, args.loglevel)
    if args.systemd:
        servicemanager.enable()
        log_handler = servicemanager.LogHandler()
    else:
        log_handler = logging.StreamHandler(sys.stdout)
    logger.setLevel(log_level)
    logger.addHandler(log_handler)
    log_handler.setFormatter(logging.Formatter(fmt="%(levelname)s [%(process)d]: %(name)s: %(message)s"))

    reactor.callWhenRunning(main, args)
    reactor.run()
    logger.info("Shutdown complete")
    sys.exit(exit_status)


if __name__ == "__main__":
    run()
