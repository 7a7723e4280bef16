"""
Numbering tokens and multipliers.

A run of `$` inside a tag name, id, class, property or text is a numbering token, replaced in each copy
produced by a multiplier with the (zero-padded) number of the copy:

    li.item$*3          ->  item1, item2, item3
    li.item$$*3         ->  item01, item02, item03
    li{$@-}*3           ->  3, 2, 1                 (descending)
    li{$@5}*3           ->  5, 6, 7                 (ascending from base 5)
    li{$@-5}*3          ->  7, 6, 5                 (descending down to base 5)

A token is always resolved by the nearest multiplier that encloses it: copies produced by an inner
multiplier form a List, and instantiation never descends into a List.
"""

import re

from zentag.nodes import Tag, Text, List, ParentChild, Sibling, FilterWrap, sibling_items, join_siblings


#####################################################################################################################################################
#####
#####  NUMBERING TOKENS
#####

class Numbering:
    """A single `$$$@-N` token."""

    def __init__(self, digits, ascending = True, base = 1):
        self.digits    = digits
        self.ascending = ascending
        self.base      = base

    def number(self, index, limit):
        if self.ascending:
            return self.base + index
        return self.base + (limit - 1) - index

    def format(self, index, limit):
        return '%0*d' % (self.digits, self.number(index, limit))

    def __eq__(self, other):
        return isinstance(other, Numbering) and \
               (self.digits, self.ascending, self.base) == (other.digits, other.ascending, other.base)

    __hash__ = None

    def __repr__(self):
        return f"Numbering({self.digits}, ascending={self.ascending}, base={self.base})"


class Numbered:
    """A field value composed of literal strings and Numbering tokens."""

    def __init__(self, parts):
        self.parts = tuple(parts)

    def format(self, index, limit):
        return ''.join(p if isinstance(p, str) else p.format(index, limit) for p in self.parts)

    def __eq__(self, other):
        return isinstance(other, Numbered) and self.parts == other.parts

    __hash__ = None

    def __repr__(self):
        return f"Numbered({list(self.parts)!r})"


_token = re.compile(r'\\(.)|(\$+)(?:@(-?)(\d*))?', re.S)

def scan(text, escapes = False):
    """
    Split `text` into literal strings and Numbering tokens. Return a plain string if there are no tokens,
    or a Numbered value otherwise. If `escapes` is True, backslash escapes are removed from `text`
    and an escaped `\\$` stays a literal dollar.
    """
    parts = []
    last  = 0
    lit   = ''

    for match in _token.finditer(text):
        escaped, dollars, minus, base = match.groups()
        lit += text[last:match.start()]
        last = match.end()

        if escaped is not None:
            lit += escaped if escapes else match.group()
            continue
        if lit: parts.append(lit)
        lit = ''

        ascending = not minus
        parts.append(Numbering(len(dollars), ascending, int(base) if base else 1))

    lit += text[last:]
    if lit: parts.append(lit)

    if not any(isinstance(p, Numbering) for p in parts):
        return ''.join(parts)
    return Numbered(parts)


def resolve(value, index, limit):
    """Substitute numbering tokens in a single field value; plain strings and None are returned unchanged."""
    if isinstance(value, Numbered):
        return value.format(index, limit)
    return value


#####################################################################################################################################################
#####
#####  INSTANTIATION & MULTIPLICATION
#####

def instantiate(node, index, limit):
    """
    Copy of `node` with all numbering tokens resolved for the `index`-th copy out of `limit`.
    Lists are left untouched: their tokens were already consumed by the inner multiplier that created them.
    """
    if isinstance(node, Tag):
        return node.copy(name    = resolve(node.name, index, limit),
                         id      = resolve(node.id, index, limit),
                         classes = tuple(resolve(c, index, limit) for c in node.classes),
                         props   = tuple((resolve(k, index, limit), resolve(v, index, limit)) for k, v in node.props),
                         text    = resolve(node.text, index, limit))
    if isinstance(node, Text):
        return Text(resolve(node.content, index, limit))
    if isinstance(node, ParentChild):
        return ParentChild(instantiate(node.parent, index, limit), instantiate(node.child, index, limit))
    if isinstance(node, Sibling):
        return join_siblings(instantiate(item, index, limit) for item in sibling_items(node))
    if isinstance(node, FilterWrap):
        return FilterWrap(node.filters, instantiate(node.inner, index, limit))
    if isinstance(node, List):
        return node
    raise TypeError(f"not an AST node: {node!r}")


def multiply(node, count):
    """`node*count`: a List of `count` instantiated copies of `node`, in generation order."""
    return List(instantiate(node, i, count) for i in range(count))
