"""
Global configuration.
"""

from zentag.errors import ConfigError


#####################################################################################################################################################
#####
#####  SYSTEM-LEVEL CONFIGURATION
#####

MAX_LENGTH = 4096           # max. length of an abbreviation; longer input fails without being parsed
MAX_DEPTH  = 24             # max. nesting depth of an abbreviation, counted as open (...) groups plus '>' levels
MAX_NODES  = 10000          # max. no. of elements and texts an abbreviation may expand to, after multiplication
MAX_WORDS  = 10000          # max. no. of words in a single lorem tag

LOREM_DEFAULT = 30          # no. of words generated by a bare `lorem` tag

# markup dialects and the primary filter that renders each of them
DIALECT_FILTERS = {
    'html':             ['html'],
    'commented-html':   ['c'],
    'haml':             ['haml'],
    'hiccup':           ['hic'],
}

# default filters chosen by the extension of the document being edited; overrides the dialect from RenderOptions
EXTENSION_FILTERS = {
    'html':     ['html'],
    'htm':      ['html'],
    'xhtml':    ['html'],
    'haml':     ['haml'],
    'clj':      ['hic'],
    'cljs':     ['hic'],
    'hic':      ['hic'],
}

CSS_SYNTAXES   = ('css', 'sass')                # 'sass' = indentation-significant syntax: no trailing semicolons
CLASS_ATTRS    = ('class', 'className')         # 'className' for JSX
SELF_CLOSING   = (' /', '/', '')                # suffix of a self-closing tag:  <br />  <br/>  <br>


#####################################################################################################################################################
#####
#####  RENDERING OPTIONS
#####

class RenderOptions:
    """
    Options of a single Expander, as opposed to ExpansionContext which holds the (shared) lookup tables.
    Options can be read as attributes: options.dialect, options.indent, ...
    """

    config_default = {
        'dialect':          'html',         # markup dialect used when no |filter is given: html, commented-html, haml, hiccup
        'css_syntax':       'css',          # 'css' or 'sass'
        'class_attr':       'class',        # name of the HTML attribute that holds classes
        'self_closing':     '/',            # suffix inserted before '>' of self-closing tags
        'indent':           '    ',         # indentation of nested blocks
    }

    _allowed = {
        'dialect':          DIALECT_FILTERS,
        'css_syntax':       CSS_SYNTAXES,
        'class_attr':       CLASS_ATTRS,
        'self_closing':     SELF_CLOSING,
    }

    def __init__(self, **config):
        for name, value in config.items():
            if name not in self.config_default: raise ConfigError(f"unknown rendering option '{name}'")
            allowed = self._allowed.get(name)
            if allowed is not None and value not in allowed:
                raise ConfigError(f"incorrect value of option '{name}': {value!r}, must be one of {list(allowed)}")

        self.config = self.config_default.copy()
        self.config.update(**config)

        if not isinstance(self.config['indent'], str) or self.config['indent'].strip():
            raise ConfigError(f"indentation must be a whitespace string, got {self.config['indent']!r}")

    def __getattr__(self, name):
        try:
            return self.__dict__['config'][name]
        except KeyError:
            raise AttributeError(name)

    def default_filters(self, extension = None):
        """List of filter names to be applied when the abbreviation has no |filter suffix."""
        if extension:
            filters = EXTENSION_FILTERS.get(extension.lower().lstrip('.'))
            if filters: return list(filters)
        return list(DIALECT_FILTERS[self.dialect])

    def __repr__(self):
        return f"RenderOptions({', '.join(f'{k}={v!r}' for k, v in self.config.items())})"
