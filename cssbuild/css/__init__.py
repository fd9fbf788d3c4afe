"""
References:
    - [selectors](https://developer.mozilla.org/en-US/docs/Web/CSS/CSS_selectors)
    - [combinators](https://developer.mozilla.org/en-US/docs/Learn/CSS/Building_blocks/Selectors/Combinators)
    - [attribute selectors](https://developer.mozilla.org/en-US/docs/Web/CSS/Attribute_selectors)
    - [pseudo classes](https://developer.mozilla.org/en-US/docs/Web/CSS/Pseudo-classes)
    - [pseudo elements](https://developer.mozilla.org/en-US/docs/Web/CSS/Pseudo-elements)

<compound>
    <element/> <id/> <class/>* <attribute/>* <pseudo-class/>* <pseudo-element/>
</compound>
<complex>
    <compound/> <combinator/> <compound/>
</complex>

element => div, a, table, ...,
id => #main,
class => .container,
attribute => [href$=".png"],
pseudo-class => :focus, :nth-of-type(even), ...,
pseudo-element => ::before, ::first-line, ...,
combinator => ' ', '+', '~', '>',
"""
from cssbuild.css.builder import (
    COMBINATORS,
    DEFAULTS,
    BuilderOptions,
    Combinator,
    CssSelectorBuilder,
    OptionalBuilderOptions,
    OrderError,
    SelectorBuilder,
    cssSelectorBuilder,
    default_options,
)
from cssbuild.css.fragments import *
from cssbuild.css import fragments

__all__ = [
    "COMBINATORS",
    "DEFAULTS",
    "BuilderOptions",
    "Combinator",
    "CssSelectorBuilder",
    "OptionalBuilderOptions",
    "OrderError",
    "SelectorBuilder",
    "cssSelectorBuilder",
    "default_options",
    *fragments.__all__,
]
