"""
Renderers of an AST into markup text, one per dialect: HTML, commented HTML, HAML, Hiccup.

All renderers walk the tree in the same way (see Renderer.render()): siblings and copies of a multiplied node
are placed on separate lines, and the rendered child of a ParentChild node becomes the content of its parent tag.
Subclasses only decide how a single tag and a standalone text are written out.
"""

import re

from zentag.nodes import Tag, Text, List, ParentChild, Sibling, FilterWrap, LoremMarker, sibling_items
from zentag.aliases import compile_snippet
from zentag.lorem import LoremGenerator


#####################################################################################################################################################
#####
#####  UTILITIES
#####

def add_indent(text, indent, re_start = re.compile(r'(?m)^(?=.)')):
    """
    Append `indent` string at the beginning of each line of `text`, including the 1st line.
    Empty lines (containing zero characters, not even a space) are left untouched!
    """
    if not indent: return text
    return re_start.sub(indent, text)

def quote(text):
    """`text` as a double-quoted string literal of Ruby or Clojure, with backslashes and double quotes escaped."""
    return '"' + text.replace('\\', '\\\\').replace('"', '\\"') + '"'


#####################################################################################################################################################
#####
#####  RENDERER
#####

class Renderer:
    """Base class for renderers. A renderer is created for a single expansion and then discarded."""

    dialect = None          # name of the dialect, selects the tag snippets table in ExpansionContext

    def __init__(self, context, options, lorem = None):
        """
        :param context: ExpansionContext with tag settings and snippets
        :param options: RenderOptions
        :param lorem: LoremGenerator to be used for lorem text; a new one is created if None
        """
        self.context = context
        self.options = options
        self.lorem   = lorem or LoremGenerator()

    def render(self, node):
        if isinstance(node, Tag):
            return self.render_tag(node)
        if isinstance(node, ParentChild):
            return self.render_tag(node.parent, self.render(node.child))
        if isinstance(node, Sibling):
            return '\n'.join(self.render(item) for item in sibling_items(node))
        if isinstance(node, List):
            return '\n'.join(self.render(item) for item in node.items)
        if isinstance(node, Text):
            return self.format_text(self.text(node.content))
        if isinstance(node, FilterWrap):
            return self.render(node.inner)
        raise TypeError(f"not an AST node: {node!r}")

    def render_tag(self, tag, content = None):
        """Output of a tag with already rendered `content` of its children (None if no children); snippets take precedence."""
        snippet = compile_snippet(self.context, self.dialect, tag.name)
        if snippet is not None:
            return snippet(content)
        return self.format_tag(tag, self.text(tag.text) or None, content or None, self.context.settings(tag.name))

    def text(self, value):
        """String value of a text field; lorem text is generated here."""
        if isinstance(value, LoremMarker):
            return self.lorem.generate(value.count)
        return value

    def indent(self, text):
        """`text` as an indented block that starts on a new line."""
        return '\n' + add_indent(text, self.options.indent)

    def format_tag(self, tag, text, content, settings):
        """
        Override in subclasses.
        :param tag: Tag node with all fields resolved to strings
        :param text: text of the tag, or None
        :param content: rendered children, or None
        :param settings: tag settings dict for this tag name, possibly empty
        """
        raise NotImplementedError

    def format_text(self, text):
        return text


#####################################################################################################################################################

class HtmlRenderer(Renderer):
    """
    <tag id="x" class="a b" key="value">text content</tag>

    A tag without text and content is self-closing if it was written with a trailing slash or is a void tag.
    Text and content go into an indented block if the content spans multiple lines, or if the tag is a block tag.
    """

    dialect = 'html'

    def format_tag(self, tag, text, content, settings):
        attrs = self.format_attrs(tag, settings)
        closed = not (text or content) and (not tag.has_body or settings.get('selfClosing'))
        if closed:
            return f"<{tag.name}{attrs}{self.options.self_closing}>"

        block = self._is_block(content, settings)
        body  = ''
        if text:    body += self.indent(text) if block else text
        if content: body += self.indent(content) if block else content
        nl = '\n' if block else ''
        return f"<{tag.name}{attrs}>{body}{nl}</{tag.name}>"

    def format_attrs(self, tag, settings):
        attrs = []
        if tag.id:      attrs.append(('id', tag.id))
        if tag.classes: attrs.append((self.options.class_attr, ' '.join(tag.classes)))

        props = dict(settings.get('defaultAttr') or {})
        props.update(tag.props)
        attrs += props.items()

        return ''.join(f' {key}="{value}"' for key, value in attrs)

    @staticmethod
    def _is_block(content, settings):
        return bool(content) and ('\n' in content or bool(settings.get('block')))


class CommentedHtmlRenderer(HtmlRenderer):
    """HTML where every tag that has an id or classes is surrounded with <!-- #id.class --> ... <!-- /#id.class --> comments."""

    def format_tag(self, tag, text, content, settings):
        html = super(CommentedHtmlRenderer, self).format_tag(tag, text, content, settings)
        if not (tag.id or tag.classes): return html

        selector = self.selector(tag)
        return f"<!-- {selector} -->\n{html}\n<!-- /{selector} -->"

    @staticmethod
    def selector(tag):
        id = f'#{tag.id}' if tag.id else ''
        return id + ''.join('.' + c for c in tag.classes)


#####################################################################################################################################################

class HamlRenderer(Renderer):
    """
    %tag#id.class{:key => "value"}
        text
        content

    The %tag token is omitted for a div that has an id or classes.
    """

    dialect = 'haml'

    def format_tag(self, tag, text, content, settings):
        implicit = tag.name == 'div' and (tag.id or tag.classes)
        out  = '' if implicit else '%' + tag.name
        out += CommentedHtmlRenderer.selector(tag)
        if tag.props:
            out += '{' + ', '.join(f':{key} => {quote(value)}' for key, value in tag.props) + '}'
        if text:    out += self.indent(text)
        if content: out += self.indent(content)
        return out


class HiccupRenderer(Renderer):
    """
    [:tag#id.class {:key "value"} "text" content]

    Text and content are moved to indented lines when the content is multiline or the tag is a block tag.
    Standalone text is rendered as a quoted string.
    """

    dialect = 'hiccup'

    def format_tag(self, tag, text, content, settings):
        block = bool(content and '\n' in content) or bool(settings.get('block'))
        out = f'[:{tag.name}' + CommentedHtmlRenderer.selector(tag)
        if tag.props:
            out += ' {' + ', '.join(f':{key} {quote(value)}' for key, value in tag.props) + '}'
        if text:
            text = self.format_text(text)
            out += self.indent(text) if block else ' ' + text
        if content:
            out += self.indent(content) if block else ' ' + content
        return out + ']'

    def format_text(self, text):
        return quote(text)
