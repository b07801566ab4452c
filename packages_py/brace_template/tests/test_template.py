import io
import re

import pytest
from brace_template import (
    FormatResult,
    FormatterConfig,
    InvalidBindingError,
    InvalidTemplateError,
    MissingBindingError,
    NonScalarResultWarning,
    Template,
    TypeMismatchError,
    template,
)


class Person:
    def __init__(self, name):
        self._name = name

    def name(self):
        return self._name


class TestConstruction:
    def test_compiles_once(self):
        tpl = Template("Hello {name}")
        assert tpl.template == "Hello {name}"
        assert len(tpl.segments) == 2
        assert tpl.binding is None

    def test_non_string_template_rejected(self):
        with pytest.raises(InvalidTemplateError):
            Template(42)
        with pytest.raises(TypeError):
            Template(None)

    def test_empty_template_allowed(self):
        assert Template("").format({}) == ""

    def test_constructor_binding(self):
        tpl = Template("{a}", {"a": 1})
        assert tpl.binding == {"a": 1}
        assert tpl.format() == "1"

    def test_constructor_rejects_bad_binding(self):
        with pytest.raises(InvalidBindingError):
            Template("{a}", "scalar")

    def test_shortcut(self):
        tpl = template("{0}")
        assert isinstance(tpl, Template)
        assert tpl.binding is None
        assert tpl % ["x"] == "x"

    def test_repr(self):
        assert repr(Template("{a}")) == "Template('{a}')"


class TestBinding:
    def test_format_without_binding_fails(self):
        with pytest.raises(MissingBindingError):
            Template("{x}").format()

    def test_bind_empty_mapping_then_format(self):
        """Absent keys in an empty default binding render as empty text."""
        tpl = Template("[{x}]")
        assert tpl.bind({}) is tpl
        assert tpl.format() == "[]"

    def test_unbind(self):
        tpl = Template("{x}", {"x": 1})
        tpl.bind(None)
        assert tpl.binding is None
        with pytest.raises(MissingBindingError):
            tpl.format()

    @pytest.mark.parametrize("value", [[], ("a",), {"k": "v"}, Person("Ann")])
    def test_bind_accepts_composites(self, value):
        assert Template("x").bind(value).binding is value

    @pytest.mark.parametrize("value", [
        "text",
        7,
        3.5,
        False,
        b"bytes",
        lambda: {},
        print,
        Person,
        re.compile("x"),
        io.StringIO(),
    ])
    def test_bind_rejects_unusable_values(self, value):
        with pytest.raises(InvalidBindingError):
            Template("x").bind(value)

    def test_rejected_bind_keeps_previous_binding(self):
        tpl = Template("{a}", {"a": 1})
        with pytest.raises(InvalidBindingError):
            tpl.bind(5)
        assert tpl.format() == "1"

    def test_explicit_binding_wins_without_replacing_default(self):
        tpl = Template("{a}", {"a": "default"})
        assert tpl.format({"a": "explicit"}) == "explicit"
        assert tpl.format() == "default"

    def test_default_binding_sees_later_changes(self):
        data = {"count": 1}
        tpl = Template("{count}", data)
        data["count"] = 2
        assert tpl.format() == "2"


class TestAccessorBinding:
    def test_record_binding(self):
        assert Template("{name}").format(Person("Alice")) == "Alice"

    def test_record_nested_in_mapping(self):
        tpl = Template("{people.0.name} & {people.1.name}")
        assert tpl.format({"people": [Person("A"), Person("B")]}) == "A & B"

    def test_missing_accessor(self):
        with pytest.raises(TypeMismatchError):
            Template("{email}").format(Person("Alice"))

    def test_template_config_applies(self):
        config = FormatterConfig(allow_private_accessors=True)
        assert Template("{_name}", config=config).format(Person("Zed")) == "Zed"


class TestOperators:
    def test_mod_interpolates(self):
        tpl = Template("{greeting}, {who}")
        assert tpl % {"greeting": "Hi", "who": "there"} == "Hi, there"
        assert tpl.interpolate({"greeting": "Yo", "who": "you"}) == "Yo, you"

    def test_reversed_mod_rejected(self):
        tpl = Template("{a}")
        with pytest.raises(TypeError, match="must come first"):
            {"a": 1} % tpl

    def test_str_unbound_returns_template_text(self):
        assert str(Template("{a} text")) == "{a} text"

    def test_str_bound_formats(self):
        assert str(Template("{a} text", {"a": "bound"})) == "bound text"
        assert f"{Template('{0}', ['x'])}!" == "x!"


class TestRender:
    def test_render_returns_result(self):
        result = Template("{a}").render({"a": [1]})
        assert isinstance(result, FormatResult)
        assert result.text == "[1]"
        assert len(result.diagnostics) == 1

    def test_format_warns_on_structured_value(self):
        with pytest.warns(NonScalarResultWarning):
            assert Template("{a}").format({"a": [1]}) == "[1]"

    def test_render_requires_binding(self):
        with pytest.raises(MissingBindingError):
            Template("{a}").render()
