"""Chat bootstrap data layer.

Holds the process-wide ``DataStore`` that seeds users, conversations and
messages and writes each of them through to a persistence sink.
"""

__version__ = "0.1.0"
