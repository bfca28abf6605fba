"""Tests for MongoDB client caching."""

import os
import unittest
from unittest.mock import MagicMock, patch

from pymongo.errors import ConnectionFailure

from adapter.mongodb import connection


@patch.object(connection, '_client', None)
class TestGetMongodbClient(unittest.TestCase):

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_url_returns_none(self):
        self.assertIsNone(connection.get_mongodb_client())

    @patch.dict(os.environ, {'MONGO_URL': 'mongodb://localhost:27017'})
    @patch('adapter.mongodb.connection.MongoClient')
    def test_connects_once_and_reuses_client(self, mock_client_cls):
        first = connection.get_mongodb_client()
        second = connection.get_mongodb_client()

        self.assertIs(first, mock_client_cls.return_value)
        self.assertIs(second, first)
        mock_client_cls.assert_called_once()

    @patch.dict(os.environ, {'MONGO_URL': 'mongodb://localhost:27017'})
    @patch('adapter.mongodb.connection.MongoClient')
    def test_failed_ping_returns_none(self, mock_client_cls):
        mock_client_cls.return_value.admin.command.side_effect = ConnectionFailure("down")
        self.assertIsNone(connection.get_mongodb_client())

    @patch.dict(os.environ, {'MONGO_URL': 'mongodb://localhost:27017'})
    @patch('adapter.mongodb.connection.MongoClient')
    def test_unhealthy_cached_client_is_replaced(self, mock_client_cls):
        stale = MagicMock()
        stale.admin.command.side_effect = ConnectionFailure("gone")
        connection._client = stale

        self.assertIs(connection.get_mongodb_client(), mock_client_cls.return_value)

    @patch.dict(os.environ, {}, clear=True)
    def test_default_database_name(self):
        self.assertEqual(connection.get_database_name(), 'access')


if __name__ == '__main__':
    unittest.main()
