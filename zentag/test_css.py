"""
Tests of CSS abbreviations.
"""

import pytest

from zentag import builtin
from zentag.context import ExpansionContext
from zentag.errors import ParseFailure
from zentag.expander import Expander
from zentag.css import CSSExpander, CSSExpression, NumericArg, ColorArg, LiteralArg, Formatter, AUTO, \
    tokenize, parse_expression, expand_hex, compile_formatter

context = ExpansionContext.default()
css = CSSExpander(context)


def make_context(**changes):
    """Default context with some tables replaced."""
    tables = dict(aliases = builtin.ALIASES, tag_snippets = builtin.TAG_SNIPPETS, tag_settings = builtin.TAG_SETTINGS,
                  css_snippets = builtin.CSS_SNIPPETS, sass_snippets = builtin.SASS_SNIPPETS, unit_aliases = builtin.UNIT_ALIASES,
                  color = builtin.COLOR, vendor_properties = builtin.VENDOR_PROPERTIES, unitless = builtin.UNITLESS)
    tables.update(changes)
    return ExpansionContext(**tables)


#####################################################################################################################################################
#####
#####  TESTS
#####

def test_001_basic():
    assert css.expand('m10') == 'margin: 10px;'
    assert css.expand('p10-20') == 'padding: 10px -20px;'
    assert css.expand('m-10') == 'margin: -10px;'
    assert css.expand('m10 20 30 40') == 'margin: 10px 20px 30px 40px;'
    assert css.expand('w1.5') == 'width: 1.5em;'
    assert css.expand('w50p') == 'width: 50%;'
    assert css.expand('fz2r') == 'font-size: 2rem;'
    assert css.expand('h10vh') == 'height: 10vh;'
    assert css.expand('dib') == 'display: inline-block;'
    assert css.expand('d') == 'display: block;'
    assert css.expand('pos absolute') == 'position: absolute;'

def test_002_colors():
    assert css.expand('c#f00') == 'color: #f00;'
    assert CSSExpander(make_context(color = {'shortenIfPossible': False})).expand('c#f00') == 'color: #ff0000;'
    assert css.expand('c') == 'color: #000;'
    assert css.expand('c#3') == 'color: #333;'
    assert css.expand('c#e0') == 'color: #e0e0e0;'
    assert css.expand('c#abcdef') == 'color: #abcdef;'
    assert css.expand('c#FC0') == 'color: #FC0;'
    assert css.expand('c#fc0rgb') == 'color: rgb(255,204,0);'

    assert CSSExpander(make_context(color = {'case': 'up'})).expand('c#fc0') == 'color: #FC0;'
    assert CSSExpander(make_context(color = {'case': 'down'})).expand('c#FC0') == 'color: #fc0;'

    trailing = CSSExpander(make_context(color = {'trailingAliases': {'s': 'solid', 'ot': 'dotted'}}))
    assert trailing.expand('bdc#f00s') == 'border-color: #f00 solid;'
    assert trailing.expand('x#00fot') == 'x: #00f dotted;'

def test_003_hex():
    assert expand_hex('f') == 'ffffff'
    assert expand_hex('f0') == 'f0f0f0'
    assert expand_hex('f03') == 'ff0033'
    assert expand_hex('abcd') == 'abcdab'
    assert expand_hex('abcde') == 'abcdea'
    assert expand_hex('abcdef') == 'abcdef'

def test_004_vendors():
    out = ['-webkit-box-shadow: inset hoff voff blur color;',
           '-moz-box-shadow: inset hoff voff blur color;',
           'box-shadow: inset hoff voff blur color;']
    assert css.expand('-wm-bxsh') == '\n'.join(out)
    assert css.expand('-mw-bdrs5') == '-moz-border-radius: 5px;\n-webkit-border-radius: 5px;\nborder-radius: 5px;'
    assert css.expand('-bdrs5') == '-webkit-border-radius: 5px;\n-moz-border-radius: 5px;\nborder-radius: 5px;'
    assert css.expand('-foo1') == '-webkit-foo: 1px;\n-moz-foo: 1px;\n-ms-foo: 1px;\n-o-foo: 1px;\nfoo: 1px;'
    assert css.expand('-wm-bdrs5!') == '-webkit-border-radius: 5px !important;\n-moz-border-radius: 5px !important;\n' \
                                       'border-radius: 5px !important;'

def test_005_important_and_tokens():
    assert css.expand('m10!') == 'margin: 10px !important;'
    assert css.expand('m10+p5-10!') == 'margin: 10px;\npadding: 5px -10px !important;'
    assert css.expand('bg+') == 'background: #fff url() 0 0 no-repeat;'
    assert css.expand('dn+db') == 'display: none;\ndisplay: block;'

def test_006_unitless():
    assert css.expand('z10') == 'z-index: 10;'
    assert css.expand('lh1.5') == 'line-height: 1.5;'
    assert css.expand('op0.5') == 'opacity: 0.5;'
    assert css.expand('fw700') == 'font-weight: 700;'
    assert css.expand('fx1') == 'flex: 1;'

def test_007_fallback():
    assert css.expand('foo10') == 'foo: 10px;'
    assert css.expand('foo 1 a') == 'foo: 1px a;'
    assert css.expand('foo') == 'foo: ;'

def test_008_sass():
    sass = CSSExpander(make_context(sass_snippets = {'bd': 'border:${1:none}'}), 'sass')
    assert sass.expand('m10') == 'margin: 10px'
    assert sass.expand('m10!') == 'margin: 10px !important'
    assert sass.expand('bd') == 'border: none'
    assert css.expand('bd') == 'border: ;'
    assert Expander(css_syntax = 'sass').expand_css('p5+-wm-bdrs2') == 'padding: 5px\n-webkit-border-radius: 2px\n' \
                                                                   '-moz-border-radius: 2px\nborder-radius: 2px'

def test_009_tokenize():
    assert tokenize('m10+p5') == ['m10', 'p5']
    assert tokenize('bg+') == ['bg+']
    assert tokenize('bd+#fff') == ['bd+#fff']
    assert tokenize('a+ b+c') == ['a+ b', 'c']
    assert tokenize('m-10+p') == ['m-10', 'p']
    assert tokenize('x+-5+y') == ['x+-5', 'y']
    assert tokenize('x+$1') == ['x+$1']
    assert tokenize('x+-y') == ['x', '-y']

def test_010_parse_expression():
    assert parse_expression('-wm-bxsh!', context) == CSSExpression('bxsh', ('webkit', 'moz'), True, [])
    assert parse_expression('-wwmo-x', context).vendor == ('webkit', 'moz', 'o')
    assert parse_expression('-m10', context).vendor == AUTO
    assert parse_expression('m10', context).vendor is None

    args = parse_expression('p1.5 10e 5p x #fc0rgb auto', context).args
    assert args == [NumericArg('1.5', 'em'), NumericArg('10', 'em'), NumericArg('5', '%'), LiteralArg('x'),
                    ColorArg('ffcc00', True, None), LiteralArg('auto')]
    assert parse_expression('p.5', context).key == 'p.'
    assert parse_expression('m10-20', context).args == [NumericArg('10', 'px'), NumericArg('-20', 'px')]

    for token in ['', '#fff', '10', '-', '!']:
        with pytest.raises(ParseFailure):
            parse_expression(token, context)

def test_011_formatter():
    assert Formatter('a:${2:x} ${1:y};')(['1']) == 'a: x 1;'
    assert Formatter('m:|;')(['1', '2', '3']) == 'm: 1 2 3;'
    assert Formatter('b:${1} ${2};')(['a', 'b', 'c']) == 'b: a b c;'
    assert Formatter('b:${1} ${2};')([]) == 'b:  ;'
    assert Formatter('b: |;')(['x']) == 'b: x;'
    assert Formatter('display:none;')(['x']) == 'display: none;'
    assert Formatter('color:${1:#000};').prop == 'color'
    assert Formatter('${1:x}').prop is None

    assert compile_formatter(context, 'css', 'm') is compile_formatter(context, 'css', 'm')
    assert compile_formatter(context, 'css', 'nothing') is None

def test_012_failures():
    zen = Expander()
    assert zen.expand_css('') is None
    assert zen.expand_css('+m') is None
    assert zen.expand_css('#fff') is None
    assert zen.expand_css('m10+') == 'margin: 10px +;'
