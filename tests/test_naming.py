import pytest

from php_codegen.core.naming import (
    NameSanitizer,
    NamingCase,
    convert_case,
    split_words,
    to_camel_case,
    to_pascal_case,
    to_snake_case,
    with_suffix,
)
from php_codegen.languages.php import PHP_RESERVED_CASE_NAMES, create_enum_case_sanitizer


class TestCaseConversion:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("user", "User"),
            ("searchUser", "SearchUser"),
            ("ResultSort", "ResultSort"),
            ("HTTPServer", "HttpServer"),
            ("date-of-birth", "DateOfBirth"),
            ("v2Api", "V2Api"),
            ("", ""),
        ],
    )
    def test_to_pascal_case(self, name, expected):
        assert to_pascal_case(name) == expected

    def test_to_camel_case(self):
        assert to_camel_case("SearchUser") == "searchUser"

    def test_to_snake_case(self):
        assert to_snake_case("dateOfBirth") == "date_of_birth"

    def test_split_words(self):
        assert split_words("getHTTPResponse_code") == ["get", "HTTP", "Response", "code"]

    def test_pascal_keeps_underscores(self):
        assert convert_case("user_name", NamingCase.PASCAL_CASE) == "User_Name"

    def test_pascal_transforms_underscores_on_request(self):
        assert (
            convert_case("user_name", NamingCase.PASCAL_CASE, transform_underscore=True)
            == "UserName"
        )

    def test_keep(self):
        assert convert_case("searchUser", NamingCase.KEEP) == "searchUser"

    def test_conversion_is_stable(self):
        once = convert_case("searchUser", NamingCase.PASCAL_CASE)
        assert convert_case(once, NamingCase.PASCAL_CASE) == once


class TestWithSuffix:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("SearchUser", "SearchUserInput"),
            ("CustomInput", "CustomInput"),
            ("UpdateUserMetadataInput", "UpdateUserMetadataInput"),
            ("Userinput", "UserinputInput"),
        ],
    )
    def test_with_suffix(self, name, expected):
        assert with_suffix(name, "Input") == expected

    def test_empty_suffix(self):
        assert with_suffix("User", "") == "User"


class TestNameSanitizer:
    def test_escape_reserved(self):
        sanitizer = NameSanitizer({"class"}, escape_prefix="_")
        assert sanitizer.is_reserved("CLASS")
        assert sanitizer.escape_reserved("Class") == "_Class"
        assert sanitizer.escape_reserved("klass") == "klass"

    def test_enum_case_sanitizer(self):
        sanitizer = create_enum_case_sanitizer()
        assert PHP_RESERVED_CASE_NAMES == {"class", "new"}
        assert sanitizer.escape_reserved("new") == "_new"
        assert sanitizer.escape_reserved("NEW") == "_NEW"
        assert sanitizer.escape_reserved("NEWS") == "NEWS"
