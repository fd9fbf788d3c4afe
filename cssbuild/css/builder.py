""" CSS Selector Builder
https://www.w3.org/TR/selectors-4/#compound

A compound selector is written in the following order, where class, attribute
and pseudo-class parts can repeat:

    element#id.class[attr]:pseudoClass::pseudoElement

Compound selectors are joined with one of the combinators ' ', '+', '~', '>'.
"""

from __future__ import annotations
import logging
from typing import Literal, TypedDict
from typing_extensions import TypeAliasType

from cssbuild.css.fragments import *

__all__ = [
    "OrderError",
    "BuilderOptions",
    "OptionalBuilderOptions",
    "DEFAULTS",
    "default_options",
    "Combinator",
    "COMBINATORS",
    "SelectorBuilder",
    "CssSelectorBuilder",
    "cssSelectorBuilder",
]

logger = logging.getLogger(__name__)

Combinator = TypeAliasType("Combinator", Literal[" ", "+", "~", ">"] | str)
COMBINATORS: tuple[str, ...] = (" ", "+", "~", ">")

DUPLICATE = "Element, id and pseudo-element should not occur more than one time inside the selector"
ORDER = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)

class OrderError(Exception): pass

class BuilderOptions(TypedDict):
    destructive: bool
    strict_combinators: bool

class OptionalBuilderOptions(TypedDict, total=False):
    destructive: bool
    strict_combinators: bool

DEFAULTS: BuilderOptions = {
    "destructive": True,
    "strict_combinators": False,
}

def default_options(origin: OptionalBuilderOptions | dict | None = None) -> BuilderOptions:
    """Fill in any option missing from `origin` with its default. `origin` is not modified."""
    options = dict(origin or {})
    for key, value in DEFAULTS.items():
        options[key] = options.get(key, value)
    return options


class SelectorBuilder:
    """Accumulates selector fragments in canonical order.

    Every append method returns the builder so calls can be chained. A call that
    would break the ordering rules raises `OrderError` and leaves the builder
    untouched.

    Args
        options (OptionalBuilderOptions | None): `destructive` controls whether
            `stringify` clears the builder (default `True`). `strict_combinators`
            rejects combinators outside of ' ', '+', '~', '>' (default `False`).
    """

    fragments: list[Fragment]
    def __init__(self, options: OptionalBuilderOptions | None = None) -> None:
        self.options = default_options(options)
        self.fragments = []

    @property
    def high_water_mark(self) -> int:
        """Highest rank appended so far, `0` when nothing is ranked yet."""
        return max(
            (fragment.rank for fragment in self.fragments if fragment.rank is not None),
            default=0
        )

    def element(self, value: str) -> SelectorBuilder:
        return self._append_(Element(value))

    def id(self, value: str) -> SelectorBuilder:
        return self._append_(Id(value))

    def class_(self, value: str) -> SelectorBuilder:
        return self._append_(Class(value))

    def attr(self, value: str) -> SelectorBuilder:
        return self._append_(Attribute(value))

    def pseudoClass(self, value: str) -> SelectorBuilder:
        return self._append_(PseudoClass(value))

    def pseudoElement(self, value: str) -> SelectorBuilder:
        return self._append_(PseudoElement(value))

    def combine(self, left: SelectorBuilder, combinator: Combinator, right: SelectorBuilder) -> SelectorBuilder:
        """Append `left` and `right` joined by `combinator`.

        Both operands are stringified, so with the default options they are
        reset afterwards. The combination is not order checked.
        """
        if combinator not in COMBINATORS:
            if self.options["strict_combinators"]:
                raise ValueError(
                    f"Unknown combinator {combinator!r}, expected one of {', '.join(repr(c) for c in COMBINATORS)}"
                )
            logger.warning("Combinator %r is not one of %r", combinator, COMBINATORS)
        return self._append_(Combination(left.stringify(), combinator, right.stringify()))

    def stringify(self) -> str:
        """Render the selector.

        With the `destructive` option (the default) the builder is cleared
        afterwards and can be reused for a new selector.
        """
        result = str(self)
        logger.debug("Rendered %r", result)
        if self.options["destructive"]:
            self.fragments = []
            logger.debug("Reset builder")
        return result

    def validate(self, fragment: Fragment):
        """Raise `OrderError` if `fragment` can not be appended."""
        if fragment.rank is None:
            return
        if fragment.unique and any(type(f) is type(fragment) for f in self.fragments):
            raise OrderError(DUPLICATE)
        if fragment.rank < self.high_water_mark:
            raise OrderError(ORDER)

    def _append_(self, fragment: Fragment) -> SelectorBuilder:
        self.validate(fragment)
        self.fragments.append(fragment)
        logger.debug("Appended %r", fragment)
        return self

    def __len__(self) -> int:
        return len(self.fragments)

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.fragments})"

    def __str__(self) -> str:
        return "".join(str(fragment) for fragment in self.fragments)

setattr(SelectorBuilder, "class", SelectorBuilder.class_)


class CssSelectorBuilder:
    """Facade that starts every selector on a new `SelectorBuilder`.

    Builders are handed out as combinator operands and reset by `stringify`, so
    two expressions must never share one. The facade only keeps the options it
    passes on to each builder.
    """

    def __init__(self, options: OptionalBuilderOptions | None = None) -> None:
        self.options = default_options(options)

    def new(self) -> SelectorBuilder:
        return SelectorBuilder(self.options)

    def element(self, value: str) -> SelectorBuilder:
        return self.new().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return self.new().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return self.new().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return self.new().attr(value)

    def pseudoClass(self, value: str) -> SelectorBuilder:
        return self.new().pseudoClass(value)

    def pseudoElement(self, value: str) -> SelectorBuilder:
        return self.new().pseudoElement(value)

    def combine(self, left: SelectorBuilder, combinator: Combinator, right: SelectorBuilder) -> SelectorBuilder:
        return self.new().combine(left, combinator, right)

    def __repr__(self) -> str:
        return f"CssSelectorBuilder({self.options})"

setattr(CssSelectorBuilder, "class", CssSelectorBuilder.class_)

cssSelectorBuilder = CssSelectorBuilder()


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    builder = cssSelectorBuilder
    print(
        builder.combine(
            builder.element('div').id('main').class_('container').class_('draggable'),
            '+',
            builder.combine(
                builder.element('table').id('data'),
                '~',
                builder.combine(
                    builder.element('tr').pseudoClass('nth-of-type(even)'),
                    ' ',
                    builder.element('td').pseudoClass('nth-of-type(even)')
                )
            )
        ).stringify()
    )
