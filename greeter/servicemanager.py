import logging

# systemd bindings are imported on demand so that the server also runs
# on machines without them; see enable().
_daemon = None
_journal = None


def enable():
    global _daemon, _journal
    import systemd.daemon
    import systemd.journal
    _daemon = systemd.daemon
    _journal = systemd.journal


def notify_ready():
    if _daemon is None:
        return
    if hasattr(_journal, 'JournalHandler'):           # official bindings
        _daemon.notify("READY=1")
    elif hasattr(_journal, 'JournaldLogHandler'):     # mosquito bindings
        _daemon.notify(_daemon.Notification.READY)
    else:
        raise AssertionError("Something is wrong with the systemd module we imported")


def LogHandler():
    if _journal is None:
        return logging.NullHandler()
    if hasattr(_journal, 'JournalHandler'):
        return _journal.JournalHandler()
    elif hasattr(_journal, 'JournaldLogHandler'):
        return _journal.JournaldLogHandler()
    else:
        raise AssertionError("Something is wrong with the systemd module we imported")
