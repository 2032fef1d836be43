"""
Permission codes granted to AMO user accounts.

The accounts API returns a user's permissions as a list of ``App:Action``
strings (for example ``Addons:Review``). This module defines those codes as
constants. Rather than refer to permissions by writing new str objects, these
constants should be imported and used with
:func:`amo.users.selectors.has_permission`.

"""
from .domain import Permission

ALL_SUPER_POWERS = Permission(Permission.apps.ANY, Permission.actions.ANY)
"""Admin override. Satisfies every permission check."""

ADDONS_CONTENTREVIEW = Permission(Permission.apps.ADDONS,
                                  Permission.actions.CONTENT_REVIEW)
"""Authorizes content review of listed add-ons."""

ADDONS_EDIT = Permission(Permission.apps.ADDONS, Permission.actions.EDIT)

ADDONS_POSTREVIEW = Permission(Permission.apps.ADDONS,
                               Permission.actions.POST_REVIEW)
"""Authorizes reviewing add-ons after they have been auto-approved."""

ADDONS_REVIEW = Permission(Permission.apps.ADDONS, Permission.actions.REVIEW)
"""Legacy add-on review."""

ADMIN_TOOLS_VIEW = Permission(Permission.apps.ADMIN_TOOLS,
                              Permission.actions.VIEW)
COLLECTIONS_EDIT = Permission(Permission.apps.COLLECTIONS,
                              Permission.actions.EDIT)
LANGPACK_SUBMIT = Permission(Permission.apps.LANGUAGE_PACK,
                             Permission.actions.SUBMIT)
REVIEWER_TOOLS_VIEW = Permission(Permission.apps.REVIEWER_TOOLS,
                                 Permission.actions.VIEW)
STATS_VIEW = Permission(Permission.apps.STATS, Permission.actions.VIEW)
THEMES_REVIEW = Permission(Permission.apps.PERSONAS,
                           Permission.actions.REVIEW)
USERS_EDIT = Permission(Permission.apps.USERS, Permission.actions.EDIT)

REVIEWER_RELATED_PERMISSIONS = frozenset([
    ADDONS_POSTREVIEW,
    ADDONS_CONTENTREVIEW,
    ADDONS_REVIEW,
])
"""Any of these gives access to the add-on reviewer features."""
