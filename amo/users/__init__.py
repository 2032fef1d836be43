"""
User accounts for the add-ons site client.

This package keeps a normalized, in-memory record of the user accounts that
the client has seen: who is logged in, every profile that has been loaded
(by id, and by username ignoring case), their notification preferences, and
whether an edit of an account is in flight. It also answers permission
questions about the logged-in user.

Quick start
-----------

Nothing here talks to the network. The code that fetches accounts turns each
response into an action (see :mod:`amo.users.actions`), the store folds the
action into a new snapshot (see :mod:`amo.users.reducer`), and views read the
snapshot through :mod:`amo.users.selectors`:

.. code-block:: python

   from amo.users import actions, permissions, selectors
   from amo.users.store import Store

   store = Store()
   store.dispatch(actions.load_current_user_account(user=response))

   if selectors.has_permission(store.state, permissions.STATS_VIEW):
       ...

Snapshots are never modified in place, so a snapshot held by a reader stays
consistent while new actions are applied.
"""

from .domain import Action, AppState, EditRequest, Permission, Permissions, \
    UserRecord, UsersState
