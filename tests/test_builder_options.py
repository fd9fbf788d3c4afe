import pytest

from cssbuild.css import DEFAULTS, CssSelectorBuilder, SelectorBuilder, cssSelectorBuilder, default_options


def test_default_options_fill_missing_keys():
    origin = {"destructive": False}
    options = default_options(origin)
    assert options == {"destructive": False, "strict_combinators": False}
    assert origin == {"destructive": False}


def test_default_options_from_nothing():
    assert default_options() == DEFAULTS
    assert default_options() is not DEFAULTS


def test_module_facade_uses_defaults():
    assert cssSelectorBuilder.options == DEFAULTS
    assert cssSelectorBuilder.id("main").options == DEFAULTS


def test_non_destructive_stringify():
    facade = CssSelectorBuilder({"destructive": False})
    selector = facade.element("a").class_("link")
    assert selector.stringify() == "a.link"
    assert selector.stringify() == "a.link"


def test_non_destructive_operands_survive_combine():
    facade = CssSelectorBuilder({"destructive": False})
    left = facade.element("div")
    right = facade.element("p")
    assert facade.combine(left, ">", right).stringify() == "div > p"
    assert left.stringify() == "div"
    assert right.stringify() == "p"


def test_builders_inherit_facade_options_without_sharing_them():
    facade = CssSelectorBuilder({"strict_combinators": True})
    first = facade.new()
    second = facade.new()
    assert first.options["strict_combinators"] is True
    assert first.options is not second.options


@pytest.mark.parametrize("combinator", [" ", "+", "~", ">"])
def test_strict_combinators_accept_known(combinator):
    facade = CssSelectorBuilder({"strict_combinators": True})
    result = facade.combine(facade.element("a"), combinator, facade.element("b")).stringify()
    assert result == f"a {combinator} b"


def test_strict_combinators_reject_unknown_before_touching_operands():
    facade = CssSelectorBuilder({"strict_combinators": True})
    left = facade.element("div")
    right = facade.element("p")
    with pytest.raises(ValueError) as exc:
        facade.combine(left, "||", right)
    assert "'||'" in str(exc.value)
    assert left.stringify() == "div"
    assert right.stringify() == "p"


def test_strict_option_on_plain_builder():
    selector = SelectorBuilder({"strict_combinators": True})
    with pytest.raises(ValueError):
        selector.combine(SelectorBuilder().element("a"), "-", SelectorBuilder().element("b"))
    assert len(selector) == 0
