"""Helpers for building user accounts and stores in tests."""

import random
from typing import Any, Dict

from mimesis import Person, Text
from mimesis.locales import Locale

from .. import actions
from ..store import Store

NOTIFICATION_NAMES = [
    'announcements',
    'dev_thanks',
    'individual_contact',
    'new_features',
    'new_review',
    'reply',
    'reviewer_reviewed',
    'sdk_upgrade_fail',
    'sdk_upgrade_success',
    'upgrade_fail',
    'upgrade_success',
]


def create_user_account_response(**props: Any) -> Dict[str, Any]:
    """A user as returned by the accounts API, with fake profile data."""
    person = Person(Locale.EN)
    text = Text(Locale.EN)
    user = {
        'id': random.randint(1, 999999),
        'username': person.username(),
        'name': person.full_name(),
        'email': person.email(),
        'biography': text.sentence(),
        'location': 'Earth',
        'occupation': 'Developer',
        'homepage': None,
        'picture_url': None,
        'created': '2017-08-15T12:01:13Z',
        'average_addon_rating': 4.3,
        'num_addons_listed': 1,
        'is_addon_developer': False,
        'is_artist': False,
        'permissions': [],
    }
    user.update(props)
    return user


def create_user_notifications_response() -> Dict[str, bool]:
    return {name: name != 'announcements' for name in NOTIFICATION_NAMES}


def signed_in_store(**user_props: Any) -> Store:
    """A store with a logged-in user built from ``user_props``."""
    store = Store()
    user_props.setdefault('id', 123)
    user_props.setdefault('username', 'user-1234')
    store.dispatch(actions.load_current_user_account(
        user=create_user_account_response(**user_props)
    ))
    return store


def anonymous_store() -> Store:
    """A store in which nobody is logged in."""
    return Store()
