"""
Output filters: `abbreviation|filter1|filter2...`

The first filter of a chain is a primary one: it renders the AST into text in a given dialect.
Subsequent filters post-process the text. The set of filters is fixed:

    html    -- plain HTML
    c       -- HTML with comments around tags that have an id or classes
    haml    -- HAML
    hic     -- Hiccup (Clojure)
    e       -- escaping of & < > characters; renders the AST with default filters first if placed at the front
"""

import logging, re

from zentag.errors import FilterError
from zentag.nodes import FilterWrap
from zentag.render import HtmlRenderer, CommentedHtmlRenderer, HamlRenderer, HiccupRenderer

logger = logging.getLogger(__name__)


def extract_filters(text, re_suffix = re.compile(r'(?:\|[\w-]*)+$')):
    """Split `text` into the abbreviation and the list of filter names from its |filter suffix. Empty names are skipped."""
    match = re_suffix.search(text)
    if not match: return text, []
    names = [name for name in match.group().split('|') if name]
    return text[:match.start()], names


#####################################################################################################################################################
#####
#####  FILTERS
#####

class Filter:
    """Base class for filters. Filters are stateless, so a single instance of each class is registered in FILTERS."""

    name = None

    def apply(self, value, pipeline):
        """Return the result of filtering `value`, which is an AST node or a string produced by a preceding filter."""
        raise NotImplementedError


class PrimaryFilter(Filter):
    """Filter that renders an AST with a given Renderer class. Can't be applied to a string."""

    renderer = None

    def apply(self, value, pipeline):
        if isinstance(value, str):
            raise FilterError(f"filter '{self.name}' can only be applied to an abbreviation, not to text")
        return self.renderer(pipeline.context, pipeline.options, pipeline.lorem).render(value)


class HtmlFilter(PrimaryFilter):
    name     = 'html'
    renderer = HtmlRenderer

class CommentedHtmlFilter(PrimaryFilter):
    name     = 'c'
    renderer = CommentedHtmlRenderer

class HamlFilter(PrimaryFilter):
    name     = 'haml'
    renderer = HamlRenderer

class HiccupFilter(PrimaryFilter):
    name     = 'hic'
    renderer = HiccupRenderer


class EscapeFilter(Filter):
    """Replace & < > with XML entities. An AST is rendered with the default filters before escaping."""

    name = 'e'

    def apply(self, value, pipeline):
        if not isinstance(value, str):
            value = pipeline.run(pipeline.defaults, value)
        return value.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')


FILTERS = {cls.name: cls() for cls in (HtmlFilter, CommentedHtmlFilter, HamlFilter, HiccupFilter, EscapeFilter)}


#####################################################################################################################################################
#####
#####  PIPELINE
#####

class Pipeline:
    """Chain of filters applied to a parsed abbreviation."""

    def __init__(self, context, options, defaults, lorem = None):
        """
        :param context: ExpansionContext
        :param options: RenderOptions
        :param defaults: list of filter names used when the abbreviation has no |filter suffix
        :param lorem: LoremGenerator passed down to renderers
        """
        self.context  = context
        self.options  = options
        self.defaults = list(defaults)
        self.lorem    = lorem

    def __call__(self, node):
        """Text output for a parsed abbreviation, possibly wrapped in FilterWrap."""
        if isinstance(node, FilterWrap):
            return self.run(node.filters, node.inner)
        return self.run(self.defaults, node)

    def run(self, filters, node):
        value = node
        for name in filters:
            filter = FILTERS.get(name)
            if filter is None: raise FilterError(f"unknown filter '{name}'")
            value = filter.apply(value, self)

        if not isinstance(value, str):
            raise FilterError(f"no primary filter in {list(filters)}")
        logger.debug("filters %s applied", list(filters))
        return value
