import pytest

from saas_tools.shared.naming import (
    pluralize,
    singularize,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
)


class TestSingularize:
    @pytest.mark.parametrize(
        "plural,singular",
        [
            ("cats", "cat"),
            ("children", "child"),
            ("people", "person"),
            ("mice", "mouse"),
            ("data", "datum"),
            ("parties", "party"),
            ("classes", "class"),
            ("boxes", "box"),
            ("churches", "church"),
            ("dishes", "dish"),
            ("TodoItems", "TodoItem"),
            ("cat", "cat"),
            ("glass", "glass"),
        ],
    )
    def test_singularize(self, plural, singular):
        assert singularize(plural) == singular

    def test_singularize_case_preservation(self):
        assert singularize("Children") == "Child"
        assert singularize("People") == "Person"


class TestPluralize:
    @pytest.mark.parametrize(
        "singular,plural",
        [
            ("cat", "cats"),
            ("party", "parties"),
            ("day", "days"),
            ("class", "classes"),
            ("box", "boxes"),
            ("church", "churches"),
            ("dish", "dishes"),
            ("child", "children"),
            ("Person", "People"),
        ],
    )
    def test_pluralize(self, singular, plural):
        assert pluralize(singular) == plural


class TestToSnakeCase:
    @pytest.mark.parametrize(
        "input_str,expected",
        [
            ("HelloWorld", "hello_world"),
            ("helloWorld", "hello_world"),
            ("hello-world", "hello_world"),
            ("hello world", "hello_world"),
            ("hello  -  world", "hello_world"),
            ("already_snake", "already_snake"),
            ("users", "users"),
            ("userId", "user_id"),
            ("createdAt", "created_at"),
            ("ABC", "a_b_c"),
            ("", ""),
        ],
    )
    def test_to_snake_case(self, input_str, expected):
        assert to_snake_case(input_str) == expected

    def test_strips_single_leading_underscore(self):
        assert to_snake_case("_private") == "private"

    def test_caching(self):
        assert to_snake_case("HelloWorld") == to_snake_case("HelloWorld") == "hello_world"


class TestToKebabCase:
    @pytest.mark.parametrize(
        "input_str,expected",
        [
            ("HelloWorld", "hello-world"),
            ("hello_world", "hello-world"),
            ("hello world", "hello-world"),
        ],
    )
    def test_to_kebab_case(self, input_str, expected):
        assert to_kebab_case(input_str) == expected


class TestToCamelCase:
    @pytest.mark.parametrize(
        "input_str,expected",
        [
            ("hello_world", "helloWorld"),
            ("hello-world", "helloWorld"),
            ("hello world", "helloWorld"),
            ("HelloWorld", "helloWorld"),
            ("userId", "userId"),
            ("id", "id"),
            ("trailing_", "trailing"),
            ("", ""),
        ],
    )
    def test_to_camel_case(self, input_str, expected):
        assert to_camel_case(input_str) == expected


class TestToPascalCase:
    @pytest.mark.parametrize(
        "input_str,expected",
        [
            ("hello_world", "HelloWorld"),
            ("hello-world", "HelloWorld"),
            ("helloWorld", "HelloWorld"),
            ("todo_items", "TodoItems"),
            ("Items", "Items"),
            ("a", "A"),
            ("_", ""),
            ("", ""),
        ],
    )
    def test_to_pascal_case(self, input_str, expected):
        assert to_pascal_case(input_str) == expected
