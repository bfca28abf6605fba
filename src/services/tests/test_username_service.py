"""Unit tests for username_service module."""

import unittest
from unittest.mock import MagicMock

from adapter.fake.user_repository import FakeUserRepository
from adapter.username.sequential import SequentialUsernameGenerator
from services.username_service import UsernameService, generate_username


class ScriptedGenerator:
    """Returns a fixed sequence of candidates."""

    def __init__(self, *candidates):
        self.candidates = list(candidates)
        self.calls = []

    def do_generate(self, parameter):
        self.calls.append(parameter)
        return self.candidates.pop(0)


class TestGenerateUsername(unittest.TestCase):

    def setUp(self):
        self.repo = FakeUserRepository()

    def test_returns_first_free_candidate_after_collisions(self):
        self.repo.create('x')
        generator = ScriptedGenerator('x', 'x', 'y')

        username = generate_username(self.repo, generator, parameter='Jane')

        self.assertEqual(username, 'y')
        self.assertEqual(generator.calls, ['Jane', 'Jane', 'Jane'])

    def test_returns_first_candidate_when_free(self):
        generator = ScriptedGenerator('alice', 'bob')
        self.assertEqual(generate_username(self.repo, generator), 'alice')
        self.assertEqual(len(generator.calls), 1)

    def test_checks_each_candidate_against_store(self):
        repo = MagicMock()
        repo.get_by_username.side_effect = [object(), None]

        username = generate_username(repo, ScriptedGenerator('a', 'b'))

        self.assertEqual(username, 'b')
        self.assertEqual([c.args[0] for c in repo.get_by_username.call_args_list], ['a', 'b'])


class TestUsernameService(unittest.TestCase):

    def setUp(self):
        self.repo = FakeUserRepository()

    def test_default_strategy_is_sequential(self):
        service = UsernameService(self.repo)
        self.assertIsInstance(service.generator, SequentialUsernameGenerator)
        self.assertEqual(service.generate(), 'bennu0')
        self.assertEqual(service.generate(), 'bennu1')

    def test_default_strategy_skips_taken_usernames(self):
        self.repo.create('bennu0')
        self.repo.create('bennu1')
        service = UsernameService(self.repo)

        self.assertEqual(service.generate(), 'bennu2')

    def test_configure_replaces_strategy(self):
        service = UsernameService(self.repo)
        first = service.generate()

        service.configure(ScriptedGenerator('custom'))

        self.assertEqual(service.generate('ignored'), 'custom')
        self.assertEqual(first, 'bennu0')


if __name__ == '__main__':
    unittest.main()
