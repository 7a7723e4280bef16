"""
Tests of the abbreviation parser: AST shape, numbering and alias resolution.
"""

import pytest

from zentag.context import ExpansionContext
from zentag.errors import ParseFailure
from zentag.nodes import Tag, Text, List, ParentChild, Sibling, FilterWrap, LoremMarker, first_tag, sibling_items, count_nodes
from zentag.numbering import Numbering, Numbered, scan, instantiate, multiply
from zentag.aliases import merge_alias, dedup, Snippet
from zentag.filters import extract_filters
from zentag.parser import MarkupParser, nesting_depth
from zentag import config

parser = MarkupParser()


def make_parser(aliases):
    context = ExpansionContext(aliases = aliases, tag_snippets = {}, tag_settings = {}, css_snippets = {}, sass_snippets = {},
                               unit_aliases = {}, color = {}, vendor_properties = {}, unitless = ())
    return MarkupParser(context)


#####################################################################################################################################################
#####
#####  TESTS
#####

def test_001_tags():
    assert parser.parse('div') == Tag('div')
    assert parser.parse('br/') == Tag('br', has_body = False)
    assert parser.parse('#a.b.b') == Tag('div', id = 'a', classes = ['b', 'b'])        # duplicates are kept
    assert parser.parse('a[x=1 y="p q" z]') == Tag('a', props = [('x', '1'), ('y', 'p q'), ('z', '')])
    assert parser.parse('a[ x=1  y = 2 ]') == Tag('a', props = [('x', '1'), ('y', '2')])
    assert parser.parse('p{hi}') == Tag('p', text = 'hi')
    assert parser.parse('p.x[k=v]{t}') == Tag('p', classes = ['x'], props = [('k', 'v')], text = 't')
    assert parser.parse('x:y-z') == Tag('x:y-z')

def test_002_structure():
    a, b, c = Tag('a'), Tag('b'), Tag('c')
    assert parser.parse('a+b') == Sibling(a, b)
    assert parser.parse('a+b+c') == Sibling(Sibling(a, b), c)
    assert parser.parse('a>b') == ParentChild(a, b)
    assert parser.parse('a>b+c') == ParentChild(a, Sibling(b, c))
    assert parser.parse('a>b>c') == ParentChild(a, ParentChild(b, c))
    assert parser.parse('(a>b)+c') == Sibling(ParentChild(a, b), c)
    assert parser.parse('((a))') == a
    assert parser.parse('a*2') == List([a, a])
    assert parser.parse('{x}') == Text('x')
    assert parser.parse('(a+b)>c') == Sibling(a, ParentChild(b, c))       # child goes under the last tag of a group

def test_003_filters():
    assert extract_filters('p|haml|e') == ('p', ['haml', 'e'])
    assert extract_filters('p') == ('p', [])
    assert extract_filters('p{a|b}') == ('p{a|b}', [])
    assert extract_filters('p||e') == ('p', ['e'])
    assert parser.parse('p|haml|e') == FilterWrap(['haml', 'e'], Tag('p'))
    assert parser.parse('p*2|c') == FilterWrap(['c'], List([Tag('p'), Tag('p')]))

def test_004_lorem():
    assert parser.parse('lorem') == Text(LoremMarker(config.LOREM_DEFAULT))
    assert parser.parse('lipsum5') == Text(LoremMarker(5))
    assert parser.parse('p>lorem10') == ParentChild(Tag('p'), Text(LoremMarker(10)))
    assert parser.parse('loremx') == Tag('loremx')

def test_005_scan():
    assert scan('plain') == 'plain'
    assert scan('item$$') == Numbered(['item', Numbering(2)])
    assert scan('x$@-3y') == Numbered(['x', Numbering(1, False, 3), 'y'])
    assert scan('$@-') == Numbered([Numbering(1, False, 1)])
    assert scan('$@7') == Numbered([Numbering(1, True, 7)])
    assert scan('a\\$b', escapes = True) == 'a$b'
    assert scan('a\\}b', escapes = True) == 'a}b'
    assert scan('a\\$b') == 'a\\$b'

def test_006_numbering_formula():
    desc = Numbering(2, ascending = False, base = 3)
    assert [desc.format(i, 2) for i in range(2)] == ['04', '03']
    asc = Numbering(3, ascending = True, base = 1)
    assert [asc.format(i, 3) for i in range(3)] == ['001', '002', '003']
    assert Numbering(1, False, 1).format(0, 5) == '5'
    assert Numbering(1).format(9, 10) == '10'                             # padding never truncates

def test_007_multiply():
    li = Tag('li', classes = [scan('i$')], text = scan('$@-'))
    assert multiply(li, 3) == List([Tag('li', classes = ['i1'], text = '3'),
                                    Tag('li', classes = ['i2'], text = '2'),
                                    Tag('li', classes = ['i3'], text = '1')])
    assert multiply(li, 0) == List([])

    inner = List([Tag('b', text = '1')])
    assert instantiate(ParentChild(Tag('a', text = scan('$')), inner), 4, 5) == ParentChild(Tag('a', text = '5'), inner)

def test_008_nested_multipliers():
    assert parser.parse('p{$}') == Tag('p', text = '1')
    i1, i2 = Tag('i', text = '1'), Tag('i', text = '2')
    assert parser.parse('(i{$}*2)*2') == List([List([i1, i2]), List([i1, i2])])
    assert parser.parse('li*2>a{$}') == List([ParentChild(Tag('li'), Tag('a', text = '1')),
                                              ParentChild(Tag('li'), Tag('a', text = '2'))])
    assert parser.parse('ul>li{$}*2') == ParentChild(Tag('ul'), List([i1.copy(name = 'li'), i2.copy(name = 'li')]))

def test_009_aliases():
    aliases = {'bq': 'blockquote', 'x': 'div.a>p', 'lnk': 'a[href=# rel=x]', 'self': 'self.s', 'ul+': 'ul>li'}
    parser = make_parser(aliases)

    assert parser.parse('bq#q.z{t}') == Tag('blockquote', id = 'q', classes = ['z'], text = 't')
    assert aliases['bq'] == 'blockquote'                                    # the table passed in is copied, not modified
    assert parser.context.aliases['bq'] == Tag('blockquote')                # the string was replaced with its AST

    assert parser.parse('x.a.b[k=v]') == ParentChild(Tag('div', classes = ['a', 'b'], props = [('k', 'v')]), Tag('p'))
    assert parser.parse('x>i') == ParentChild(Tag('div', classes = ['a']), ParentChild(Tag('p'), Tag('i')))
    assert parser.parse('lnk[href=y]') == Tag('a', props = [('href', 'y'), ('rel', 'x')])
    assert parser.parse('self') == Tag('self', classes = ['s'])
    assert parser.parse('ul+') == ParentChild(Tag('ul'), Tag('li'))
    assert parser.parse('bq*2') == List([Tag('blockquote'), Tag('blockquote')])

    # the cached AST is never modified by a merge
    parser.parse('x#one.c')
    assert parser.context.aliases['x'] == ParentChild(Tag('div', classes = ['a']), Tag('p'))

def test_010_merge():
    alias = Sibling(ParentChild(Tag('a', id = 'i', classes = ['x', 'y'], props = [('k', '1')], text = 'old'), Tag('b')), Tag('c'))
    tag = Tag('name', id = 'new', classes = ['y', 'z'], props = [('k', '2'), ('m', '3')])
    merged = merge_alias(alias, tag)
    assert first_tag(merged) == Tag('a', id = 'new', classes = ['x', 'y', 'z'], props = [('k', '2'), ('m', '3')])
    assert merged.right == Tag('c')
    assert first_tag(alias).text == 'old'
    assert merge_alias(Text('t'), tag) == Text('t')
    assert dedup(['a', 'b', 'a', 'c', 'b']) == ('a', 'b', 'c')

def test_011_snippet():
    snippet = Snippet('<x>\n${child}\n</x>')
    assert snippet('body') == '<x>\nbody\n</x>'
    assert snippet() == '<x>\n\n</x>'
    assert Snippet('<!doctype html>')('tail') == '<!doctype html>tail'

def test_012_failures():
    for text in ['div>', 'div+', '(div', 'div)', 'div*', 'div[', 'div{x', '>', '', '+a', 'a**2', '[x]', 'a>>b']:
        with pytest.raises(ParseFailure):
            parser.parse(text)

    with pytest.raises(ParseFailure) as ex_info:
        parser.parse('div>')
    assert ex_info.value.label == 'end of abbreviation'
    assert ex_info.value.pos == 3

    with pytest.raises(ParseFailure, match = 'parent tag'):
        parser.parse('{a}>b')
    with pytest.raises(ParseFailure, match = 'expandable tag'):
        parser.parse('zz+')

def test_013_limits():
    assert nesting_depth('a>(b>c){x>y}') == 3
    assert nesting_depth('a[t="(>"]') == 0
    assert nesting_depth('a{\\}>}') == 0
    assert nesting_depth('(p>b)+(p>b)') == 2
    assert nesting_depth('p>b>i+(a>(b>c))>d') == 6
    assert nesting_depth('a)>b') == 1

    deep = '>'.join(['i'] * config.MAX_DEPTH)
    assert first_tag(parser.parse(deep)) == Tag('i')
    with pytest.raises(ParseFailure, match = 'nesting depth'):
        parser.parse('(' * 30 + 'a' + ')' * 30)
    with pytest.raises(ParseFailure):
        parser.parse('a+' * config.MAX_LENGTH)

def test_014_long_chains():
    chain = parser.parse('a+' * 1500 + 'a')
    assert len(sibling_items(chain)) == 1501
    assert first_tag(chain) == Tag('a')
    assert sibling_items(parser.parse('a+b+c')) == [Tag('a'), Tag('b'), Tag('c')]
    assert sibling_items(Tag('a')) == [Tag('a')]

    groups = parser.parse('+'.join(['(p>b)'] * 25))
    assert sibling_items(groups) == [ParentChild(Tag('p'), Tag('b'))] * 25

def test_015_size_limits():
    assert count_nodes(parser.parse('ul>li*3>a')) == 7
    assert count_nodes(parser.parse('p>lorem20')) == 21
    assert count_nodes(parser.parse('i*%d' % config.MAX_NODES)) == config.MAX_NODES

    for text in ['i*%d' % (config.MAX_NODES + 1), 'i*999999999', '(i*100)*101', 'li*200>b*200',
                 '+'.join(['(i*5000)'] * 3), 'lorem%d' % (config.MAX_WORDS + 1), '(lorem5000)*3']:
        with pytest.raises(ParseFailure):
            parser.parse(text)
