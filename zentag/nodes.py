"""
AST of an abbreviation.

    ul#nav>li.item$*3>a{Link $}

parses to:

    ParentChild(
        Tag('ul', id = 'nav'),
        List([ParentChild(Tag('li', classes = ('item1',)), Tag('a', text = 'Link 1')),
              ParentChild(Tag('li', classes = ('item2',)), Tag('a', text = 'Link 2')),
              ParentChild(Tag('li', classes = ('item3',)), Tag('a', text = 'Link 3'))]))

Nodes are never modified after construction: all transformations (multiplication, alias merging)
build new nodes with copy(). Thanks to this, parsed aliases can be cached and shared between expansions.
Values of node fields are either plain strings or Numbered values (see zentag.numbering)
that are resolved to strings when a multiplier instantiates the node.
"""


########################################################################################################################################################
#####
#####  BASE NODE
#####

class Node:

    _fields = ()

    def copy(self, **changes):
        """Shallow copy of this node with some fields replaced."""
        dup = object.__new__(self.__class__)
        dup.__dict__.update(self.__dict__)
        dup.__dict__.update(changes)
        return dup

    def __eq__(self, other):
        return type(self) is type(other) and self.__dict__ == other.__dict__

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = None

    def __repr__(self):
        args = ', '.join(f'{name}={getattr(self, name)!r}' for name in self._fields)
        return f"{self.__class__.__name__}({args})"


########################################################################################################################################################
#####
#####  LEAF NODES
#####

class Tag(Node):
    """
    A single element: `name#id.class1.class2[key=value]{text}`.
    `has_body` is False when the tag was written with a trailing slash (`br/`), which forces self-closing output.
    """
    _fields = ('name', 'has_body', 'id', 'classes', 'props', 'text')

    def __init__(self, name, has_body = True, id = None, classes = (), props = (), text = None):
        self.name     = name
        self.has_body = has_body
        self.id       = id
        self.classes  = tuple(classes)
        self.props    = tuple((key, value) for key, value in props)
        self.text     = text


class Text(Node):
    """Standalone text: `{...}` outside a tag, or lorem text (content is a LoremMarker then)."""
    _fields = ('content',)

    def __init__(self, content):
        self.content = content


class LoremMarker:
    """Placeholder for `count` words of lorem ipsum; generated anew each time the node is rendered."""

    def __init__(self, count):
        self.count = count

    def __eq__(self, other):
        return isinstance(other, LoremMarker) and self.count == other.count

    __hash__ = None

    def __repr__(self):
        return f"LoremMarker({self.count})"


########################################################################################################################################################
#####
#####  COMPOSITE NODES
#####

class List(Node):
    """Copies of a node produced by a multiplier, in generation order. Numbering inside is already resolved."""
    _fields = ('items',)

    def __init__(self, items):
        self.items = tuple(items)


class ParentChild(Node):
    """`parent>child`, where `parent` is always a Tag."""
    _fields = ('parent', 'child')

    def __init__(self, parent, child):
        assert isinstance(parent, Tag)
        self.parent = parent
        self.child  = child


class Sibling(Node):
    """
    `left+right`. A chain `a+b+c` is nested to the left: Sibling(Sibling(a, b), c).
    Chains can be as long as the abbreviation, so they're walked with sibling_items() rather than recursively.
    """
    _fields = ('left', 'right')

    def __init__(self, left, right):
        self.left  = left
        self.right = right


class FilterWrap(Node):
    """`inner|filter1|filter2`: the outermost node of an abbreviation that carries an explicit filter chain."""
    _fields = ('filters', 'inner')

    def __init__(self, filters, inner):
        self.filters = tuple(filters)
        self.inner   = inner


########################################################################################################################################################
#####
#####  TRAVERSAL
#####

def sibling_items(node):
    """Operands of a left-nested chain of Sibling nodes, in document order. A non-Sibling node is a chain of one."""
    items = []
    while isinstance(node, Sibling):
        items.append(node.right)
        node = node.left
    items.append(node)
    items.reverse()
    return items

def join_siblings(items):
    """Inverse of sibling_items(): a left-nested chain of Sibling nodes built from a non-empty sequence."""
    items = iter(items)
    node = next(items)
    for item in items:
        node = Sibling(node, item)
    return node

def first_tag(node):
    """The first Tag in `node` in depth-first, leftmost order; None if there are no tags at all."""
    if isinstance(node, Tag):           return node
    if isinstance(node, ParentChild):   return node.parent
    if isinstance(node, (Sibling, List)):
        for item in (sibling_items(node) if isinstance(node, Sibling) else node.items):
            tag = first_tag(item)
            if tag is not None: return tag
    if isinstance(node, FilterWrap):    return first_tag(node.inner)
    return None

def replace_first_tag(node, replace):
    """
    Build a copy of `node` where the first Tag (as found by first_tag()) is substituted with `replace(tag)`.
    Subtrees that don't contain the tag are shared with the original, not copied.
    Return a pair: (new node, True if a tag was found).
    """
    if isinstance(node, Tag):
        return replace(node), True
    if isinstance(node, ParentChild):
        return ParentChild(replace(node.parent), node.child), True
    if isinstance(node, Sibling):
        items = sibling_items(node)
        for pos, item in enumerate(items):
            items[pos], found = replace_first_tag(item, replace)
            if found: return join_siblings(items), True
        return node, False
    if isinstance(node, List):
        items = list(node.items)
        for pos, item in enumerate(items):
            items[pos], found = replace_first_tag(item, replace)
            if found: return List(items), True
        return node, False
    if isinstance(node, FilterWrap):
        inner, found = replace_first_tag(node.inner, replace)
        return FilterWrap(node.filters, inner), found
    return node, False

def count_nodes(node):
    """No. of Tag and Text nodes in `node`, which is the no. of elements and texts it renders to. Lorem text counts once per word."""
    if isinstance(node, Tag):           return 1
    if isinstance(node, Text):          return max(1, node.content.count) if isinstance(node.content, LoremMarker) else 1
    if isinstance(node, ParentChild):   return 1 + count_nodes(node.child)
    if isinstance(node, Sibling):       return sum(count_nodes(item) for item in sibling_items(node))
    if isinstance(node, List):          return sum(count_nodes(item) for item in node.items)
    if isinstance(node, FilterWrap):    return count_nodes(node.inner)
    return 0
