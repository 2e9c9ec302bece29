"""Module: __init__.py

Author: Michael Economou
Date: 2025-02-03

Infrastructure - Event System.

Pure Python subscribable store used to notify renderers of table state changes.
"""

from tablestore.utils.events.observable import ObservableStore, Subscriber, Unsubscriber

__all__ = ["ObservableStore", "Subscriber", "Unsubscriber"]
