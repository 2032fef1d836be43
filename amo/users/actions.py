"""
Actions understood by :func:`amo.users.reducer.reduce`.

These are produced by the layer that talks to the accounts API. For example,
once the current user's profile has been fetched:

.. code-block:: python

   from amo.users import actions

   store.dispatch(actions.load_current_user_account(user=response))

Creators check their arguments up front and raise
:class:`.InvalidAction` if a required one is missing; the reducer itself
accepts any payload.
"""

from typing import Any, Mapping

from .domain import Action, UserRecord
from .exceptions import InvalidAction

EDIT_USER_ACCOUNT = 'EDIT_USER_ACCOUNT'
FINISH_EDIT_USER_ACCOUNT = 'FINISH_EDIT_USER_ACCOUNT'
LOAD_CURRENT_USER_ACCOUNT = 'LOAD_CURRENT_USER_ACCOUNT'
LOAD_USER_ACCOUNT = 'LOAD_USER_ACCOUNT'
LOAD_USER_NOTIFICATIONS = 'LOAD_USER_NOTIFICATIONS'
LOG_OUT_USER = 'LOG_OUT_USER'


def load_user_account(user: UserRecord) -> Action:
    """Store a user fetched from the accounts API."""
    if not user:
        raise InvalidAction('user is required')
    return Action(LOAD_USER_ACCOUNT, {'user': user})


def load_current_user_account(user: UserRecord) -> Action:
    """Store the authenticated user and make them the current user."""
    if not user:
        raise InvalidAction('user is required')
    return Action(LOAD_CURRENT_USER_ACCOUNT, {'user': user})


def load_user_notifications(notifications: Mapping[str, bool],
                            username: str) -> Action:
    """
    Attach notification preferences to an already loaded user.

    Parameters
    ----------
    notifications : dict
        Notification name to enabled flag. An empty mapping means that the
        preferences have been loaded and all of them are off.
    username : str
        Matched case-insensitively against the loaded users.

    Returns
    -------
    :class:`.Action`

    """
    if notifications is None:
        raise InvalidAction('notifications are required')
    if not username:
        raise InvalidAction('username is required')
    return Action(LOAD_USER_NOTIFICATIONS,
                  {'notifications': notifications, 'username': username})


def edit_user_account(error_handler_id: str, user_fields: Mapping[str, Any],
                      user_id: int) -> Action:
    """
    Record that an edit of ``user_id`` has been submitted.

    The edited fields are not applied to the stored record. The network layer
    loads the updated user once the edit succeeds.
    """
    if not error_handler_id:
        raise InvalidAction('error_handler_id is required')
    if user_fields is None:
        raise InvalidAction('user_fields are required')
    if user_id is None:
        raise InvalidAction('user_id is required')
    return Action(EDIT_USER_ACCOUNT, {
        'error_handler_id': error_handler_id,
        'user_fields': user_fields,
        'user_id': user_id,
    })


def finish_edit_user_account() -> Action:
    """Record that the in-flight edit has completed, successfully or not."""
    return Action(FINISH_EDIT_USER_ACCOUNT)


def log_out_user() -> Action:
    return Action(LOG_OUT_USER)
