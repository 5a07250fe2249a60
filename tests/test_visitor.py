import pytest

from php_codegen.core.config import GeneratorConfig
from php_codegen.core.generator import UnknownTypeError
from php_codegen.core.schema import (
    InputObjectDefinition,
    InputValue,
    NamedTypeRef,
    TypeKind,
    TypeRegistry,
    parse_schema,
)
from php_codegen.languages.php import PhpSchemaVisitor


def transfer_class(name, params):
    return f"class {name}\n{{\n\tpublic function __construct({params}) {{}}\n}}"


def visit(make_visitor, schema, name, **options):
    return make_visitor(**options).visit(schema.get_definition(name))


class TestEnums:
    def test_enum_cases(self, make_visitor, schema):
        assert visit(make_visitor, schema, "ResultSort") == (
            " enum ResultSort {\n    case ASC;\n    case DESC;\n}\n"
        )

    def test_enum_case_order(self, make_visitor, schema):
        result = visit(make_visitor, schema, "UserRole")
        assert "    case ADMIN;\n    case USER;\n    case EDITOR;\n}" in result

    def test_enum_value_override(self, make_visitor, schema):
        result = visit(
            make_visitor,
            schema,
            "ResultSort",
            enum_values={"ResultSort": {"ASC": "ASCENDING"}},
        )
        assert "case ASCENDING;" in result
        assert "case DESC;" in result

    def test_tab_indent(self, make_visitor, schema):
        assert "\tcase ASC;" in visit(make_visitor, schema, "ResultSort", use_tabs=True)

    def test_reserved_case_names_escaped(self):
        schema = parse_schema("enum Action { new CLASS other }")
        visitor = PhpSchemaVisitor(schema.registry)
        result = visitor.visit(schema.get_definition("Action"))
        assert "case _new;" in result
        assert "case _CLASS;" in result
        assert "case other;" in result

    def test_reserved_override_literal_escaped(self):
        schema = parse_schema("enum Action { CREATE }")
        config = GeneratorConfig(enum_values={"Action": {"CREATE": "new"}})
        result = PhpSchemaVisitor(schema.registry, config).visit(
            schema.get_definition("Action")
        )
        assert "case _new;" in result

    def test_description_becomes_doc_comment(self):
        schema = parse_schema('"""Sort order""" enum Sort { ASC }')
        definition = schema.get_definition("Sort")

        commented = PhpSchemaVisitor(schema.registry).visit(definition)
        plain = PhpSchemaVisitor(
            schema.registry, GeneratorConfig(add_comments=False)
        ).visit(definition)

        assert commented.startswith("/** Sort order */\n enum Sort {")
        assert plain.startswith(" enum Sort {")


class TestInputObjects:
    def test_single_field(self, make_visitor, schema):
        assert visit(make_visitor, schema, "MetadataSearch") == transfer_class(
            "MetadataSearchInput", "public readonly int $something"
        )

    def test_list_fields(self, make_visitor, schema):
        assert visit(make_visitor, schema, "InputWithArray") == transfer_class(
            "InputWithArrayInput",
            "public readonly Iterable $f,public readonly Iterable $g",
        )

    @pytest.mark.parametrize(
        "name,params",
        [
            ("CustomInput", "public readonly object $id"),
            ("UpdateUserMetadataInput", "public readonly int $something"),
        ],
    )
    def test_existing_suffix_kept(self, make_visitor, schema, name, params):
        assert visit(make_visitor, schema, name) == transfer_class(name, params)

    def test_mixed_field_types(self, make_visitor, schema):
        assert visit(make_visitor, schema, "SearchUser") == transfer_class(
            "SearchUserInput",
            "public readonly string $username,"
            "public readonly string $email,"
            "public readonly string $name,"
            "public readonly object $dateOfBirth,"
            "public readonly ResultSort $sort,"
            "public readonly MetadataSearchInput $metadata",
        )

    def test_input_references(self, make_visitor, schema):
        assert visit(make_visitor, schema, "UpdateUserInput") == transfer_class(
            "UpdateUserInput",
            "public readonly object $id,"
            "public readonly string $username,"
            "public readonly UpdateUserMetadataInput $metadata",
        )

    def test_members_prefix(self, make_visitor, schema):
        result = visit(make_visitor, schema, "MetadataSearch", class_members_prefix="m_")
        assert "public readonly int $m_something" in result

    def test_types_prefix(self, make_visitor, schema):
        result = visit(make_visitor, schema, "MetadataSearch", types_prefix="Gql")
        assert result.startswith("class GqlMetadataSearchInput\n")

    def test_unknown_field_type_raises(self):
        visitor = PhpSchemaVisitor(TypeRegistry({"Int": TypeKind.SCALAR}))
        definition = InputObjectDefinition(
            name="Broken", fields=(InputValue("ref", NamedTypeRef("Missing")),)
        )
        with pytest.raises(UnknownTypeError):
            visitor.visit(definition)


class TestFieldArguments:
    def test_arguments_class(self, make_visitor, schema):
        assert visit(make_visitor, schema, "User") == transfer_class(
            "UserFriendsArgs", "public readonly int $skip,public readonly int $limit"
        )

    def test_query_fields(self, make_visitor, schema):
        result = visit(make_visitor, schema, "Query")
        fragments = [
            transfer_class("QueryUserArgs", "public readonly object $id"),
            transfer_class(
                "QuerySearchUserArgs", "public readonly SearchUserInput $searchFields"
            ),
            transfer_class(
                "QueryUpdateUserArgs", "public readonly UpdateUserMetadataInput $input"
            ),
            transfer_class("QueryAuthorizeArgs", "public readonly Iterable $roles"),
        ]
        assert result == "\n".join(fragments)

    def test_fields_without_arguments_emit_nothing(self, make_visitor, schema):
        assert "QueryMeArgs" not in visit(make_visitor, schema, "Query")
        assert visit(make_visitor, schema, "Chat") is None

    def test_keep_naming_convention(self, make_visitor, schema):
        result = visit(make_visitor, schema, "Query", naming_convention="keep")
        assert "class QuerysearchUserArgs\n" in result

    def test_field_definition_directly(self, make_visitor, schema):
        visitor = make_visitor()
        friends = schema.get_definition("User").fields[-1]
        me = schema.get_definition("Query").fields[0]

        assert visitor.field_definition(friends, "Person").startswith(
            "class PersonFriendsArgs\n"
        )
        assert visitor.field_definition(me, "Query") is None


class TestDispatch:
    def test_unsupported_definition(self, make_visitor):
        with pytest.raises(TypeError):
            make_visitor().visit("not a definition")

    def test_get_enum_value_without_override(self, make_visitor):
        visitor = make_visitor(enum_values={"ResultSort": {"ASC": "UP"}})
        assert visitor.get_enum_value("ResultSort", "ASC") == "UP"
        assert visitor.get_enum_value("ResultSort", "DESC") == "DESC"
        assert visitor.get_enum_value("UserRole", "ADMIN") == "ADMIN"
