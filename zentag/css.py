"""
CSS abbreviations:  m10+p5-10!  ->  margin: 10px;  padding: 5px -10px !important;

Each `+`-separated token is:   [-vendors-] key [args] [!]

    -           automatic vendor prefixes, as configured for the property
    -wm-        explicit vendors: w=webkit, m=moz, s=ms, o=o
    key         leading run of characters up to a space, '#', a digit or '-digit'; looked up in the snippet table
    args        numbers with optional units (10, 1.5, 10p, -20), colors (#f00, #fc0rgb) or other literals
    !           !important

Snippets are templates of the form "margin:|;" or "color:${1:#000};". Placeholders (| or ${n} or ${n:default})
are filled with consecutive arguments; arguments in excess of the placeholders go into the last one.
"""

import re

from parsimonious.grammar import Grammar
from parsimonious.nodes import NodeVisitor
from parsimonious.exceptions import ParseError

from zentag.errors import ParseFailure


AUTO    = 'auto'                    # marker of automatic vendor prefixes
VENDORS = {'w': 'webkit', 'm': 'moz', 's': 'ms', 'o': 'o'}


#####################################################################################################################################################
#####
#####  EXPRESSION
#####

class CSSExpression:
    """
    A single parsed CSS token.
    `vendor` is None, AUTO, or a tuple of vendor names; `args` is a list of NumericArg, ColorArg and LiteralArg objects.
    """

    def __init__(self, key, vendor = None, important = False, args = ()):
        self.key       = key
        self.vendor    = vendor
        self.important = important
        self.args      = list(args)

    def __eq__(self, other):
        return isinstance(other, CSSExpression) and self.__dict__ == other.__dict__

    __hash__ = None

    def __repr__(self):
        return f"CSSExpression({self.key!r}, vendor={self.vendor!r}, important={self.important}, args={self.args!r})"


class Arg:

    def render(self, context, unitless = False):
        raise NotImplementedError

    def __eq__(self, other):
        return type(self) is type(other) and self.__dict__ == other.__dict__

    __hash__ = None

    def __repr__(self):
        return f"{self.__class__.__name__}({', '.join(map(repr, self.__dict__.values()))})"


class NumericArg(Arg):
    """A number with a unit, like 10px. Units are dropped when the argument belongs to a unitless property."""

    def __init__(self, value, unit):
        self.value = value
        self.unit  = unit

    def render(self, context, unitless = False):
        return self.value if unitless else self.value + self.unit


class ColorArg(Arg):
    """
    A color, #rrggbb. `rgb` is True if the color should be written as rgb(r,g,b);
    `trailing` is an alias of a suffix appended after the color, as configured in context.color['trailingAliases'].
    """

    def __init__(self, hex6, rgb = False, trailing = None):
        self.hex6     = hex6
        self.rgb      = rgb
        self.trailing = trailing

    def render(self, context, unitless = False):
        prefs = context.color
        if self.rgb:
            out = 'rgb(%d,%d,%d)' % tuple(int(self.hex6[i:i+2], 16) for i in (0, 2, 4))
        else:
            hex = self.hex6
            if prefs['shortenIfPossible'] and hex[0::2].lower() == hex[1::2].lower():
                hex = hex[0::2]
            if prefs['case'] == 'up':     hex = hex.upper()
            elif prefs['case'] == 'down': hex = hex.lower()
            out = '#' + hex

        if self.trailing:
            out += ' ' + prefs['trailingAliases'][self.trailing]
        return out


class LiteralArg(Arg):

    def __init__(self, value):
        self.value = value

    def render(self, context, unitless = False):
        return self.value


def expand_hex(digits):
    """Expand 1-6 hex digits to a 6-digit color: f -> ffffff, f0 -> f0f0f0, f03 -> ff0033, f0f0 -> f0f0f0."""
    n = len(digits)
    if n == 1: return digits * 6
    if n == 2: return digits * 3
    if n == 3: return ''.join(d + d for d in digits)
    return (digits + digits)[:6]


#####################################################################################################################################################
#####
#####  PARSING
#####

def tokenize(text, re_glued = re.compile(r'(?:[ #0-9$]|-[0-9])')):
    """
    Split `text` on '+'. A piece that is empty or starts with a space, '#', a digit, '$' or '-digit'
    is glued back to the preceding one, so `bg+` and `foo+#fff` stay single tokens.
    """
    tokens = []
    for piece in text.split('+'):
        if tokens and (not piece or re_glued.match(piece)):
            tokens[-1] += '+' + piece
        else:
            tokens.append(piece)
    return tokens


ARGS_GRAMMAR = r"""
args        =  arg* ws
arg         =  ws (number / color / literal)

number      =  ~r"(-?(?:[0-9]+\.?[0-9]*|\.[0-9]+))([a-zA-Z%%]*)"
color       =  ~r"#([0-9a-fA-F]{1,6})(rgb)?(%s)?"
literal     =  ~r"[^ ]+"
ws          =  ~r" *"
"""

class ArgsVisitor(NodeVisitor):
    """Converts a parse tree of an argument string into a list of Arg objects."""

    unwrapped_exceptions = (ParseFailure,)

    def __init__(self, context):
        self.context = context

    def generic_visit(self, node, children):
        return children if node.children else node.text

    def visit_args(self, node, children):
        args, _ = children
        return list(args) if args else []

    def visit_arg(self, node, children):
        _, (arg,) = children
        return arg

    def visit_number(self, node, children):
        value, unit = node.match.groups()
        if unit:   unit = self.context.unit(unit)
        else:      unit = 'em' if '.' in value else 'px'
        return NumericArg(value, unit)

    def visit_color(self, node, children):
        digits, rgb, trailing = node.match.groups()
        return ColorArg(expand_hex(digits), bool(rgb), trailing or None)

    def visit_literal(self, node, children):
        return LiteralArg(node.text)


def args_grammar(context):
    """Grammar of an argument string, built for the trailing color aliases configured in `context`; cached on the context."""
    def build():
        aliases = sorted(context.color['trailingAliases'], key = len, reverse = True)
        pattern = '|'.join(re.escape(alias).replace('"', r'\"') for alias in aliases)
        return Grammar(ARGS_GRAMMAR % pattern)

    return context.memo('css-args', tuple(sorted(context.color['trailingAliases'])), build)


_vendor  = re.compile(r'^(-[wmso]+-|-|)(.*)$', re.S)
_key_end = re.compile(r'[ #0-9]|-[0-9]')

def parse_expression(token, context):
    """Parse a single CSS token into a CSSExpression; raise ParseFailure if it contains no property key."""
    important = token.endswith('!')
    if important: token = token[:-1]

    prefix, rest = _vendor.match(token).groups()
    if not prefix:          vendor = None
    elif prefix == '-':     vendor = AUTO
    else:
        vendor = tuple(dict.fromkeys(VENDORS[c] for c in prefix[1:-1]))

    end = _key_end.search(rest)
    key, args = (rest[:end.start()], rest[end.start():]) if end else (rest, '')
    if not key: raise ParseFailure("CSS property", 0, token)

    try:
        tree = args_grammar(context).parse(args)
    except ParseError as ex:
        raise ParseFailure("CSS argument", ex.pos, args)

    return CSSExpression(key, vendor, important, ArgsVisitor(context).visit(tree))


#####################################################################################################################################################
#####
#####  SNIPPETS
#####

class Formatter:
    """
    Compiled CSS snippet template. Calling the formatter with a list of rendered arguments returns a declaration.
    `prop` is the name of the CSS property declared by the template, or None if it can't be found.
    """

    re_prop        = re.compile(r'^([a-z-]+):\s*')
    re_placeholder = re.compile(r'\||\$\{(?:(\d)|)(?::(.+?)|)\}')

    def __init__(self, template):
        match = self.re_prop.match(template)
        if match:
            self.prop = match.group(1)
            template  = f'{self.prop}: ' + template[match.end():]
        else:
            self.prop = None

        self.parts = []         # literal strings interleaved with (index, default) slots
        last = 0
        for i, match in enumerate(self.re_placeholder.finditer(template)):
            number, default = match.groups()
            self.parts.append(template[last:match.start()])
            self.parts.append((int(number) - 1 if number else i, default or ''))
            last = match.end()
        self.parts.append(template[last:])

        self.slots = max((p[0] + 1 for p in self.parts if isinstance(p, tuple)), default = 0)

    def __call__(self, args):
        args = list(args)
        if self.slots and len(args) > self.slots:
            args[self.slots-1:] = [' '.join(args[self.slots-1:])]

        out = []
        for part in self.parts:
            if isinstance(part, str):
                out.append(part)
                continue
            index, default = part
            out.append(args[index] if 0 <= index < len(args) else default)
        return ''.join(out)


def compile_formatter(context, syntax, key):
    """
    Formatter for `key` in a given syntax, or None if there's no snippet.
    Compiled formatters are cached on the context; keys without a snippet are not.
    """
    tables = [context.sass_snippets, context.css_snippets] if syntax == 'sass' else [context.css_snippets]
    for table in tables:
        template = table.get(key)
        if template is not None:
            return context.memo('css-snippet', (syntax, key), lambda: Formatter(template))
    return None


#####################################################################################################################################################
#####
#####  EXPANDER
#####

class CSSExpander:
    """Expansion of CSS abbreviations in a given syntax, 'css' or 'sass'."""

    def __init__(self, context, syntax = 'css'):
        self.context = context
        self.syntax  = syntax

    def expand(self, text):
        """Declarations for all tokens of `text`, newline-joined. Raise ParseFailure if any token is malformed."""
        return '\n'.join(self.render(parse_expression(token, self.context)) for token in tokenize(text))

    def render(self, expr):
        formatter = compile_formatter(self.context, self.syntax, expr.key)
        prop = formatter.prop if formatter and formatter.prop else expr.key
        unitless = prop in self.context.unitless
        args = [arg.render(self.context, unitless) for arg in expr.args]

        if formatter: line = formatter(args)
        else:         line = f"{expr.key}: {' '.join(args)};"

        if expr.important:
            line = line[:-1] + ' !important;' if line.endswith(';') else line + ' !important'
        if self.syntax == 'sass' and line.endswith(';'):
            line = line[:-1]

        if expr.vendor is None: return line
        vendors = self.context.vendors(prop) if expr.vendor == AUTO else expr.vendor
        return '\n'.join([f'-{vendor}-{line}' for vendor in vendors] + [line])
