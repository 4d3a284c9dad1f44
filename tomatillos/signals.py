from blinker import Namespace

_signals = Namespace()

# Sent with the changed content uri as sender and no payload.
# Receivers subscribe with content_changed.connect(fn, sender=uri) and re-query.
content_changed = _signals.signal("content-changed")


def notify_change(uri):
    content_changed.send(uri)
