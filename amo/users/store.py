"""
A container for the application state.

The state itself is immutable. :class:`.Store` holds the latest snapshot,
applies actions to it one at a time, and tells subscribers when it changes.
Callers own their store and pass it to whatever needs it.
"""

import logging
from typing import Callable, List, Optional

from .domain import Action, AppState
from .reducer import reduce_app

logger = logging.getLogger(__name__)

Listener = Callable[[AppState], None]
Reducer = Callable[[Optional[AppState], Action], AppState]


class Store(object):
    """
    Holds the current :class:`.AppState`.

    .. code-block:: python

       from amo.users import actions, selectors
       from amo.users.store import Store

       store = Store()
       store.dispatch(actions.load_current_user_account(user=response))
       selectors.get_current_user(store.state.users)

    """

    def __init__(self, state: Optional[AppState] = None,
                 reducer: Reducer = reduce_app) -> None:
        """
        Start from ``state``, or from an empty state if not given.

        Parameters
        ----------
        state : :class:`.AppState`
        reducer : function
            Called as ``reducer(state, action)``. Defaults to
            :func:`.reducer.reduce_app`.

        """
        self._reducer = reducer
        self._listeners: List[Listener] = []
        self._state = state if state is not None \
            else reducer(None, Action('@@INIT'))

    @property
    def state(self) -> AppState:
        """The latest snapshot."""
        return self._state

    def dispatch(self, action: Action) -> AppState:
        """
        Apply ``action`` and return the new snapshot.

        Subscribers are only called if the snapshot changed. Exceptions
        raised by a subscriber propagate to the caller.
        """
        previous = self._state
        self._state = self._reducer(previous, action)
        if self._state is previous:
            logger.debug('%s did not change the state', action.type)
            return self._state

        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Call ``listener`` with the new snapshot after every change.

        Returns
        -------
        function
            Call it to unsubscribe.

        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe
