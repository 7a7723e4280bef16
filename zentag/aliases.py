"""
Tag aliases and markup snippets.

An alias maps a short tag name to a whole abbreviation, e.g. "bq" -> "blockquote" or "ul+" -> "ul>li".
When a tag with such a name is parsed, it is replaced with the alias's AST, where the first tag receives
the id, classes, properties and text of the original tag:

    bq.quote{Hi}    ->  blockquote.quote{Hi}
    a:link#home     ->  a#home[href=http://]

A snippet is a literal piece of markup rendered in place of a tag, e.g. "!!!" -> "<!doctype html>".
"""

from zentag.nodes import first_tag, replace_first_tag

CHILD = '${child}'          # marks the place where rendered children are inserted into a snippet


#####################################################################################################################################################
#####
#####  ALIASES
#####

def dedup(items):
    """Items of a sequence with exact duplicates removed; the first occurrence of each item is kept."""
    seen = set()
    return tuple(x for x in items if not (x in seen or seen.add(x)))

def merge_props(defaults, props):
    """Properties from `defaults` updated with `props`; keys keep the order of their first occurrence."""
    merged = dict(defaults)
    merged.update(props)
    return tuple(merged.items())

def merge_alias(alias, tag):
    """
    New tree built from the `alias` AST, where the first tag takes over the id and text of the calling `tag`,
    has its classes extended with `tag`'s classes and its properties overridden by `tag`'s properties.
    The `alias` tree itself is not modified, it may be a cached value.
    """
    def merge(first):
        return first.copy(id      = tag.id,
                          classes = dedup(first.classes + tag.classes),
                          props   = merge_props(first.props, tag.props),
                          text    = tag.text)

    if first_tag(alias) is None: return alias
    node, _ = replace_first_tag(alias, merge)
    return node

def expand_alias(context, tag, parse, key = None):
    """
    Resolve `tag` through the alias table of `context`. Return the merged alias tree,
    or None if there's no alias registered under `key` (tag.name by default).
    `parse` is a function that converts an alias string to AST.
    """
    key = tag.name if key is None else key
    if not isinstance(key, str): return None             # names with numbering tokens are never aliased
    alias = context.alias(key, parse)
    if alias is None: return None
    return merge_alias(alias, tag)


#####################################################################################################################################################
#####
#####  SNIPPETS
#####

class Snippet:
    """Compiled markup snippet: a callable that inserts rendered content of a tag into the template."""

    def __init__(self, template):
        head, _, tail = template.partition(CHILD)
        self.head = head
        self.tail = tail

    def __call__(self, content = None):
        return self.head + (content or '') + self.tail

def compile_snippet(context, dialect, name):
    """
    Snippet registered for a tag `name` in a given markup `dialect`, or None.
    Compiled snippets are cached; misses are not, so the cache never holds more entries than the snippet table.
    """
    if not isinstance(name, str): return None
    template = context.tag_snippets.get(dialect, {}).get(name)
    if template is None: return None
    return context.memo('snippet', (dialect, name), lambda: Snippet(template))
