"""Football Network backend.

Administration service for football clubs, the connections between
them, users and the club-connection graph.
"""

__version__ = "0.3.0"
