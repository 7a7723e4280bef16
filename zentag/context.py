"""
Expansion context: lookup tables consumed by the expanders, together with the caches derived from them.
"""

import logging, threading

from zentag.errors import ConfigError, ConfigMissing

logger = logging.getLogger(__name__)


########################################################################################################################################################
#####
#####  EXPANSION CONTEXT
#####

class ExpansionContext:
    """
    Owner of all lookup tables and of all cross-call mutable state. A context can be shared by many Expanders;
    cache access is serialized with a reentrant lock, so expansions may run concurrently in different threads.

    Tables (all obligatory, ConfigMissing is raised when any of them is None):
    - aliases:            {name: abbreviation string or parsed AST}; string entries are replaced with their AST on first use
    - tag_snippets:       {dialect: {name: template}}, dialect being 'html', 'haml' or 'hiccup'; ${child} in a template
                          marks the place where contents of the tag are inserted
    - tag_settings:       {name: {'selfClosing': bool, 'block': bool, 'defaultAttr': {key: value}}}
    - css_snippets:       {key: template}, with ${1}, ${1:default} or | placeholders
    - sass_snippets:      {key: template}, consulted before css_snippets for indentation-significant syntax
    - unit_aliases:       {alias: unit}, e.g. {'p': '%'}
    - color:              {'shortenIfPossible': bool, 'case': 'auto'|'up'|'down', 'trailingAliases': {token: suffix}}
    - vendor_properties:  {css property: [vendor, ...]}, vendors for an automatic "-" prefix
    - unitless:           collection of css properties whose numeric values are written without units
    """

    TABLES = ('aliases', 'tag_snippets', 'tag_settings', 'css_snippets', 'sass_snippets',
              'unit_aliases', 'color', 'vendor_properties', 'unitless')

    VENDORS_DEFAULT = ('webkit', 'moz', 'ms', 'o')
    COLOR_CASES     = ('auto', 'up', 'down')

    def __init__(self, aliases = None, tag_snippets = None, tag_settings = None, css_snippets = None, sass_snippets = None,
                 unit_aliases = None, color = None, vendor_properties = None, unitless = None):

        tables = locals()
        for name in self.TABLES:
            if tables[name] is None: raise ConfigMissing(name)

        self.aliases           = dict(aliases)
        self.tag_snippets      = {dialect: dict(table) for dialect, table in tag_snippets.items()}
        self.tag_settings      = dict(tag_settings)
        self.css_snippets      = dict(css_snippets)
        self.sass_snippets     = dict(sass_snippets)
        self.unit_aliases      = dict(unit_aliases)
        self.vendor_properties = {prop: tuple(vendors) for prop, vendors in vendor_properties.items()}
        self.unitless          = frozenset(unitless)

        self.color = {'shortenIfPossible': True, 'case': 'auto', 'trailingAliases': {}}
        self.color.update(color)
        if self.color['case'] not in self.COLOR_CASES:
            raise ConfigError(f"incorrect color case '{self.color['case']}', must be one of {list(self.COLOR_CASES)}")

        self.lock    = threading.RLock()
        self._caches = {}

    @classmethod
    def default(cls):
        """Context with a fresh copy of the built-in tables from zentag.builtin."""
        from zentag import builtin
        return cls(aliases           = builtin.ALIASES,
                   tag_snippets      = builtin.TAG_SNIPPETS,
                   tag_settings      = builtin.TAG_SETTINGS,
                   css_snippets      = builtin.CSS_SNIPPETS,
                   sass_snippets     = builtin.SASS_SNIPPETS,
                   unit_aliases      = builtin.UNIT_ALIASES,
                   color             = builtin.COLOR,
                   vendor_properties = builtin.VENDOR_PROPERTIES,
                   unitless          = builtin.UNITLESS)

    ###  Lookups  ###

    def alias(self, name, parse):
        """
        AST of the alias `name`, or None if there's no such alias. An alias given as a string is parsed
        with `parse(text)` on first use, and the AST is stored back in the table in place of the string.
        """
        with self.lock:
            entry = self.aliases.get(name)
            if isinstance(entry, str):
                entry = self.aliases[name] = parse(entry)
                logger.debug("alias '%s' parsed and cached", name)
            return entry

    def settings(self, name):
        """Tag settings of a given tag name as a dict, possibly empty."""
        return self.tag_settings.get(name) or {}

    def vendors(self, prop):
        return self.vendor_properties.get(prop, self.VENDORS_DEFAULT)

    def unit(self, alias):
        return self.unit_aliases.get(alias, alias)

    def memo(self, cache, key, factory):
        """
        Value cached under `key` in the cache named `cache`; calculated with factory() on first request.
        factory() may return None, which is cached, too.
        """
        with self.lock:
            values = self._caches.setdefault(cache, {})
            if key not in values:
                values[key] = factory()
                logger.debug("%s cache filled for %r", cache, key)
            return values[key]

    def invalidate(self):
        """Forget all derived values; must be called after the tables were modified by the owner of the context."""
        with self.lock:
            self._caches.clear()
