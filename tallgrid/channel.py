class Channel(object):
    """
    A minimal publish/subscribe point: data sources broadcast their events over it, hosts and wrappers connect to it.

    >>> from tallgrid.channel import Channel
    >>> c = Channel()
    >>> def r0(data):
    ...     print("R0 RECEIVED", data)
    ...
    >>> def r1(data):
    ...     print("R1 RECEIVED", data)
    ...
    >>> disconnect0 = c.connect(r0)
    >>> disconnect1 = c.connect(r1)
    >>> c.broadcast("hallo")
    R0 RECEIVED hallo
    R1 RECEIVED hallo
    >>> disconnect0()
    >>> c.broadcast("hallo")
    R1 RECEIVED hallo

    Disconnecting twice is harmless:

    >>> disconnect0()
    >>> len(c.receivers)
    1
    """

    def __init__(self):
        self.receivers = []

    def connect(self, receiver):
        # receiver :: function that takes data
        self.receivers.append(receiver)

        def disconnect():
            # identity, not equality: the same bound method may be connected more than once
            for index, r in enumerate(self.receivers):
                if r is receiver:
                    self.receivers = self.receivers[:index] + self.receivers[index + 1:]
                    return

        return disconnect

    def broadcast(self, data):
        # iterate over a snapshot; receivers may (dis)connect while being called
        for r in list(self.receivers):
            r(data)
