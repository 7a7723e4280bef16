# -*- coding: utf-8 -*-
"""
Parser of Zentag abbreviations: text -> AST of zentag.nodes.

Parsing is done in two steps. Parsimonious matches the text against the PEG grammar from zentag.grammar
(ordered choice: the first alternative that matches wins), and AbbreviationAST rewrites the resulting
parse tree bottom-up into AST nodes. Multipliers, tag aliases and lorem tags are expanded during rewriting,
so the final AST contains only plain tags, texts and the structural nodes that connect them.
"""

import re

from parsimonious.grammar import Grammar as Parsimonious
from parsimonious.nodes import NodeVisitor
from parsimonious.exceptions import ParseError, IncompleteParseError

from zentag import config
from zentag.errors import ZenError, ParseFailure
from zentag.grammar import grammar, LABELS
from zentag.nodes import Tag, Text, LoremMarker, List, ParentChild, Sibling, FilterWrap, join_siblings, count_nodes
from zentag.numbering import scan, instantiate, multiply
from zentag.aliases import expand_alias
from zentag.context import ExpansionContext
from zentag.filters import extract_filters


#####################################################################################################################################################
#####
#####  UTILITIES
#####

def nesting_depth(text):
    """
    Nesting depth of an abbreviation: max. no. of open (...) groups plus the no. of '>' operators
    that are still open at a given point, outside {text} and "quotes". A '>' stays open until the end
    of the group it occurs in, so `(p>b)+(p>b)` is 2 levels deep, while `p>b>i` is 2 and `a>(b>c)` is 3.
    """
    depth = groups = children = 0
    outer = []                  # no. of open '>' outside of each open group
    closing = None              # closing character of the {text} or "quoted" span we're in, if any
    escaped = False

    for char in text:
        if closing:
            if escaped:             escaped = False
            elif char == '\\':      escaped = True
            elif char == closing:   closing = None
        elif char == '{':   closing = '}'
        elif char == '"':   closing = '"'
        elif char == '(':
            outer.append(children)
            groups += 1
        elif char == ')':
            if outer:
                children = outer.pop()
                groups -= 1
        elif char == '>':   children += 1
        depth = max(depth, groups + children)

    return depth

def attach_child(parent, child):
    """
    `parent>child` where `parent` is any node, not necessarily a Tag:
    - each copy in a List gets its own child, instantiated with the index of the copy;
    - in a Sibling or ParentChild tree (a group or an expanded alias), the child goes under the last innermost tag.
    """
    if isinstance(parent, Tag):
        return ParentChild(parent, child)
    if isinstance(parent, List):
        count = len(parent.items)
        return List(attach_child(item, instantiate(child, i, count)) for i, item in enumerate(parent.items))
    if isinstance(parent, ParentChild):
        return ParentChild(parent.parent, attach_child(parent.child, child))
    if isinstance(parent, Sibling):
        return Sibling(parent.left, attach_child(parent.right, child))
    raise ParseFailure("parent tag")

def attach_points(parent):
    """No. of copies of a child that attach_child() places under `parent`."""
    if isinstance(parent, Tag):             return 1
    if isinstance(parent, List):            return sum(attach_points(item) for item in parent.items)
    if isinstance(parent, ParentChild):     return attach_points(parent.child)
    if isinstance(parent, Sibling):         return attach_points(parent.right)
    return 0


#####################################################################################################################################################
#####
#####  GRAMMAR
#####

class Grammar(Parsimonious):
    """Parsimonious grammar of abbreviations, with translation of Parsimonious errors to ParseFailure."""

    def __init__(self, rules = grammar):
        super(Grammar, self).__init__(rules)

    def parse_abbreviation(self, text):
        """Parse tree of `text`, or ParseFailure if the text doesn't match the grammar or is too large/deep."""
        if len(text) > config.MAX_LENGTH:
            raise ParseFailure(f"abbreviation of at most {config.MAX_LENGTH} characters")
        if nesting_depth(text) > config.MAX_DEPTH:
            raise ParseFailure(f"nesting depth of at most {config.MAX_DEPTH}")
        try:
            return self.parse(text)
        except IncompleteParseError as ex:
            raise ParseFailure("end of abbreviation", ex.pos, text)
        except ParseError as ex:
            name = getattr(ex.expr, 'name', '')
            raise ParseFailure(LABELS.get(name, name or "abbreviation"), ex.pos, text)
        except RecursionError:
            raise ParseFailure("shallower nesting")


#####################################################################################################################################################
#####
#####  AST
#####

class AbbreviationAST(NodeVisitor):
    """
    Rewriting of a Parsimonious parse tree into AST nodes. A new instance is created for every parsed text.
    Every visit_XXX() method receives the values returned for the children of a parse node
    and returns the value of the node itself.
    """

    unwrapped_exceptions = (ZenError, RecursionError)

    LOREM = re.compile(r'(?:lorem|lipsum)(\d*)$')

    def __init__(self, parser, expanding = frozenset()):
        """
        :param parser: MarkupParser that provides the context and parses aliases
        :param expanding: names of aliases being expanded by outer calls; they're not expanded again, to prevent infinite recursion
        """
        self.parser    = parser
        self.context   = parser.context
        self.expanding = expanding

    def generic_visit(self, node, children):
        return children if node.children else node.text

    ###  Structure  ###

    def visit_abbreviation(self, node, children):
        return children[0]

    def visit_siblings(self, node, children):
        first, rest = children
        items = [first] + [item for _, item in rest]
        self._check_size(sum(count_nodes(item) for item in items), node)
        return join_siblings(items)

    def visit_sibling_item(self, node, children):
        return children[0]

    def visit_expand(self, node, children):
        tag = children[0]
        key = tag.name + '+' if isinstance(tag.name, str) else None
        expanded = self._alias(tag, key) if key else None
        if expanded is None: raise ParseFailure("expandable tag", node.start, node.full_text)
        return expanded

    def visit_parent_child(self, node, children):
        parent, child = children
        for _, siblings in child:
            self._check_size(count_nodes(parent) + attach_points(parent) * count_nodes(siblings), node)
            return attach_child(parent, siblings)
        return parent

    def visit_multiplier(self, node, children):
        operand, mult = children
        for _, count in mult:
            self._check_size(count * count_nodes(operand), node)
            return multiply(operand, count)
        return operand

    def visit_operand(self, node, children):
        return children[0]

    def visit_group(self, node, children):
        return children[1]

    ###  Elements  ###

    def visit_tag(self, node, children):
        tag = children[0]
        lorem = self._lorem(tag)
        if lorem is not None: return lorem
        expanded = self._alias(tag)
        return tag if expanded is None else expanded

    def visit_element(self, node, children):
        (name, has_body), shorts, props, text = children
        return self._make_tag(name, has_body, shorts, props, text)

    def visit_implicit(self, node, children):
        shorts, props, text = children
        return self._make_tag('div', True, shorts, props, text)

    def visit_tag_name(self, node, children):
        name = node.text
        has_body = not name.endswith('/')
        if not has_body: name = name[:-1]
        return scan(name), has_body

    def visit_attr_short(self, node, children):
        return children[0]

    def visit_tag_id(self, node, children):
        return 'id', children[1]

    def visit_tag_class(self, node, children):
        return 'class', children[1]

    def visit_short_name(self, node, children):
        return scan(node.text)

    def visit_props(self, node, children):
        _, _, first, rest, _, _ = children
        return [first] + [prop for _, prop in rest]

    def visit_prop(self, node, children):
        name, value = children
        for _, _, _, val in value:
            return name, val
        return name, ''

    def visit_prop_name(self, node, children):
        return scan(node.text)

    def visit_prop_value(self, node, children):
        return children[0]

    def visit_quoted(self, node, children):
        return scan(node.text[1:-1])

    def visit_unquoted(self, node, children):
        return scan(node.text)

    def visit_text(self, node, children):
        return Text(scan(node.match.group(1), escapes = True))

    def visit_count(self, node, children):
        return int(node.text)

    ###  Helpers  ###

    @staticmethod
    def _check_size(size, node):
        if size > config.MAX_NODES:
            raise ParseFailure(f"expansion of at most {config.MAX_NODES} elements", node.start, node.full_text)

    @staticmethod
    def _make_tag(name, has_body, shorts, props, text):
        id = None
        classes = []
        for kind, value in shorts:
            if kind == 'id': id = value
            else:            classes.append(value)
        props = props[0] if props else ()
        text  = text[0].content if text else None
        return Tag(name, has_body, id, classes, props, text)

    def _lorem(self, tag):
        """Text node with lorem ipsum if `tag` is a lorem tag, None otherwise."""
        if not isinstance(tag.name, str): return None
        match = self.LOREM.match(tag.name)
        if not match: return None
        count = int(match.group(1)) if match.group(1) else config.LOREM_DEFAULT
        if count > config.MAX_WORDS: raise ParseFailure(f"lorem of at most {config.MAX_WORDS} words")
        return Text(LoremMarker(count))

    def _alias(self, tag, key = None):
        """Tag expanded through an alias registered under `key` (tag.name by default), or None."""
        key = tag.name if key is None else key
        if not isinstance(key, str) or key in self.expanding: return None
        return expand_alias(self.context, tag, lambda text: self.parser.parse_expr(text, self.expanding | {key}), key)


#####################################################################################################################################################
#####
#####  MARKUP PARSER
#####

class MarkupParser:
    """
    Parser of markup abbreviations.

    >>> MarkupParser().parse('p.note{Hi}')
    Tag(name='p', has_body=True, id=None, classes=('note',), props=(), text='Hi')
    """

    grammar = None          # class-level Grammar instance shared by all parsers; the grammar is stateless

    def __init__(self, context = None):
        self.context = context if context is not None else ExpansionContext.default()
        if MarkupParser.grammar is None:
            MarkupParser.grammar = Grammar()

    def parse(self, text):
        """
        AST of a complete abbreviation, optionally with a |filter suffix (FilterWrap is returned then).
        Numbering tokens outside multipliers are resolved as if the whole abbreviation were multiplied by 1.
        """
        source, filters = extract_filters(text)
        node = self.parse_expr(source)
        try:
            node = instantiate(node, 0, 1)
        except RecursionError:
            raise ParseFailure("shallower nesting")
        return FilterWrap(filters, node) if filters else node

    def parse_expr(self, text, expanding = frozenset()):
        """AST of an abbreviation without filters. Numbering tokens outside multipliers are left unresolved."""
        tree = self.grammar.parse_abbreviation(text)
        try:
            return AbbreviationAST(self, expanding).visit(tree)
        except RecursionError:
            raise ParseFailure("shallower nesting")
