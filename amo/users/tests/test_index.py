"""Tests for :mod:`amo.users.index`."""

from unittest import TestCase, mock

from .. import index
from ..exceptions import IndexOutOfSync


class TestReindex(TestCase):
    """Tests for :func:`.index.reindex`."""

    def test_new_user(self):
        by_username = {'paul': 2}
        new_index = index.reindex(by_username, {1: {'username': 'JohN'}},
                                  1, 'JohN')
        self.assertEqual(new_index, {'paul': 2, 'john': 1})
        self.assertEqual(by_username, {'paul': 2})

    def test_changed_username(self):
        new_index = index.reindex({'john': 1}, {1: {'username': 'Johnny'}},
                                  1, 'Johnny',
                                  previous_username='John')
        self.assertEqual(new_index, {'johnny': 1})

    def test_changed_case_only(self):
        new_index = index.reindex({'john': 1}, {1: {'username': 'JOHN'}},
                                  1, 'JOHN',
                                  previous_username='john')
        self.assertEqual(new_index, {'john': 1})

    def test_previous_key_claimed_by_another_user(self):
        new_index = index.reindex({'john': 2}, {},
                                  1, 'johnny',
                                  previous_username='john')
        self.assertEqual(new_index, {'john': 2, 'johnny': 1})

    def test_freed_username_goes_to_remaining_holder(self):
        """A renamed user's old key points to another user with that name."""
        by_id = {1: {'username': 'john'}, 2: {'username': 'bob'}}
        new_index = index.reindex({'john': 2}, by_id, 2, 'bob',
                                  previous_username='John')
        self.assertEqual(new_index, {'john': 1, 'bob': 2})

    @mock.patch(f'{index.__name__}.logger')
    def test_unusable_username(self, mock_logger):
        """A user without a string username is not indexed."""
        new_index = index.reindex({'john': 1}, {1: {'username': None}},
                                  1, None,
                                  previous_username='john')
        self.assertEqual(new_index, {})
        self.assertEqual(mock_logger.warning.call_count, 1)


class TestVerify(TestCase):
    """Tests for :func:`.index.verify`."""

    def test_consistent(self):
        index.verify({1: {'id': 1, 'username': 'John'}}, {'john': 1})

    def test_unknown_user(self):
        with self.assertRaises(IndexOutOfSync):
            index.verify({}, {'john': 1})

    def test_stale_username(self):
        by_id = {1: {'id': 1, 'username': 'Johnny'}}
        self.assertEqual(len(index.find_inconsistencies(by_id,
                                                        {'john': 1})), 1)
        with self.assertRaises(IndexOutOfSync):
            index.verify(by_id, {'john': 1})
