import json

import pytest

from php_codegen.cli import CLIError, build_config, create_parser, main


def parse(*argv):
    return create_parser().parse_args(["schema.graphql", *argv])


class TestBuildConfig:
    def test_defaults(self):
        config = build_config(parse())
        assert config.list_type == "Iterable"
        assert config.open_tag
        assert config.add_comments

    def test_flags(self):
        config = build_config(
            parse(
                "-o",
                "out/Types.php",
                "--namespace",
                "Acme\\Types",
                "--list-type",
                "array",
                "--members-prefix",
                "m_",
                "--types-prefix",
                "Gql",
                "--naming-convention",
                "keep",
                "--no-comments",
                "--no-open-tag",
                "--use-tabs",
            )
        )
        assert config.output_file == "out/Types.php"
        assert config.namespace == "Acme\\Types"
        assert config.list_type == "array"
        assert config.class_members_prefix == "m_"
        assert config.types_prefix == "Gql"
        assert config.naming_convention == "keep"
        assert not config.add_comments
        assert not config.open_tag
        assert config.indent == "\t"

    def test_repeated_options(self):
        config = build_config(
            parse(
                "--scalar",
                "DateTime=\\DateTimeImmutable",
                "--scalar",
                "ID=string",
                "--enum-value",
                "ResultSort.ASC=ASCENDING",
                "--import",
                "Foo\\Bar",
            )
        )
        assert config.scalars == {"DateTime": "\\DateTimeImmutable", "ID": "string"}
        assert config.enum_values == {"ResultSort": {"ASC": "ASCENDING"}}
        assert config.imports == ["Foo\\Bar"]

    def test_flags_extend_config_file(self, tmp_path):
        path = tmp_path / "codegen.json"
        path.write_text(
            json.dumps(
                {
                    "namespace": "FromFile",
                    "scalars": {"DateTime": "string"},
                    "imports": ["A\\B"],
                }
            ),
            encoding="utf-8",
        )
        config = build_config(
            parse("--config", str(path), "--scalar", "ID=int", "--import", "C\\D")
        )
        assert config.namespace == "FromFile"
        assert config.scalars == {"DateTime": "string", "ID": "int"}
        assert config.imports == ["A\\B", "C\\D"]

    @pytest.mark.parametrize(
        "argv",
        [
            ("--scalar", "DateTime"),
            ("--scalar", "=string"),
            ("--enum-value", "ResultSort=ASCENDING"),
        ],
    )
    def test_invalid_assignments(self, argv):
        with pytest.raises(CLIError):
            build_config(parse(*argv))

    def test_missing_config_file(self, tmp_path):
        with pytest.raises(CLIError, match="Configuration error"):
            build_config(parse("--config", str(tmp_path / "missing.json")))


class TestMain:
    def test_prints_code(self, schema_file, capsys):
        assert main([str(schema_file)]) == 0

        out = capsys.readouterr().out
        assert out.startswith("<?php\n\nnamespace App\\Generated;\n")
        assert "class UserFriendsArgs\n" in out

    def test_writes_output_file(self, schema_file, tmp_path, capsys):
        output = tmp_path / "php" / "generated" / "resolvers.php"

        assert main([str(schema_file), "-o", str(output)]) == 0

        code = output.read_text(encoding="utf-8")
        assert "namespace " in code
        assert "enum UserRole {" in code
        assert capsys.readouterr().out == ""

    def test_options_reach_generator(self, schema_file, capsys):
        exit_code = main(
            [
                str(schema_file),
                "--no-open-tag",
                "--namespace",
                "Acme",
                "--scalar",
                "DateTime=\\DateTimeImmutable",
                "--enum-value",
                "ResultSort.ASC=ASCENDING",
                "--members-prefix",
                "m_",
            ]
        )
        out = capsys.readouterr().out

        assert exit_code == 0
        assert out.startswith("namespace Acme;\n")
        assert "public readonly \\DateTimeImmutable $m_dateOfBirth" in out
        assert "case ASCENDING;" in out

    def test_warnings_on_stderr(self, schema_file, capsys):
        assert main([str(schema_file)]) == 0
        assert "Scalar 'DateTime' has no PHP mapping" in capsys.readouterr().err

    def test_verbose_shows_metadata(self, schema_file, capsys):
        assert main([str(schema_file), "--verbose"]) == 0

        err = capsys.readouterr().err
        assert "Generation Metadata" in err
        assert "Scalar Mapping" in err

    def test_missing_schema(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.graphql")]) == 1
        assert "File not found" in capsys.readouterr().err

    def test_invalid_schema(self, tmp_path, capsys):
        path = tmp_path / "broken.graphql"
        path.write_text("type Query {", encoding="utf-8")

        assert main([str(path)]) == 1
        assert "Invalid schema" in capsys.readouterr().err

    @pytest.mark.parametrize(
        "options",
        [
            {"scalars": ["DateTime"]},
            {"indent_size": "4"},
            {"imports": "App\\Json"},
        ],
    )
    def test_wrongly_typed_config_file(self, schema_file, tmp_path, capsys, options):
        path = tmp_path / "codegen.json"
        path.write_text(json.dumps(options), encoding="utf-8")

        assert main([str(schema_file), "--config", str(path)]) == 1

        captured = capsys.readouterr()
        assert "Configuration error" in captured.err
        assert captured.out == ""

    def test_bad_option_value(self, schema_file, capsys):
        assert main([str(schema_file), "--scalar", "DateTime"]) == 1
        assert "--scalar expects KEY=VALUE" in capsys.readouterr().err
