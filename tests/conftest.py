"""Shared fixtures for php_codegen tests."""

import pytest

from php_codegen.core.config import GeneratorConfig
from php_codegen.core.schema import parse_schema
from php_codegen.languages.php import PhpSchemaVisitor

SCHEMA_SDL = """
scalar DateTime

type Query {
  me: User!
  user(id: ID!): User!
  searchUser(searchFields: SearchUser!): [User!]!
  updateUser(input: UpdateUserMetadataInput!): [User!]!
  authorize(roles: [UserRole]): Boolean
}

input InputWithArray {
  f: [String]
  g: [SearchUser]
}

input SearchUser {
  username: String
  email: String
  name: String
  dateOfBirth: DateTime
  sort: ResultSort
  metadata: MetadataSearch
}

input MetadataSearch {
  something: Int
}

input UpdateUserInput {
  id: ID!
  username: String
  metadata: UpdateUserMetadataInput
}

input UpdateUserMetadataInput {
  something: Int
}

input CustomInput {
  id: ID!
}

enum ResultSort {
  ASC
  DESC
}

interface Node {
  id: ID!
}

type User implements Node {
  id: ID!
  username: String!
  email: String!
  name: String
  dateOfBirth: DateTime
  friends(skip: Int, limit: Int): [User!]!
}

type Chat implements Node {
  id: ID!
  users: [User!]!
  title: String
}

enum UserRole {
  ADMIN
  USER
  EDITOR
}

union SearchResult = Chat | User
"""


@pytest.fixture(scope="session")
def schema_sdl():
    return SCHEMA_SDL


@pytest.fixture(scope="session")
def schema():
    return parse_schema(SCHEMA_SDL)


@pytest.fixture
def make_visitor(schema):
    """Build a visitor over the shared schema with config overrides."""

    def _make(**options):
        return PhpSchemaVisitor(schema.registry, GeneratorConfig(**options))

    return _make


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.graphql"
    path.write_text(SCHEMA_SDL, encoding="utf-8")
    return path
