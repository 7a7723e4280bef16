"""
Top-level API of Zentag.

    >>> Expander().expand('ul>li.item$*2')
    '<ul>\\n    <li class="item1"></li>\\n    <li class="item2"></li>\\n</ul>'
    >>> Expander().expand_css('m10+p5-10!')
    'margin: 10px;\\npadding: 5px -10px !important;'
"""

import logging

from zentag.config import RenderOptions
from zentag.errors import ParseFailure, FilterError
from zentag.context import ExpansionContext
from zentag.parser import MarkupParser
from zentag.filters import Pipeline
from zentag.lorem import LoremGenerator
from zentag.css import CSSExpander

logger = logging.getLogger(__name__)


########################################################################################################################################################
#####
#####  EXPANDER
#####

class Expander:
    """
    Expansion of markup and CSS abbreviations with a given set of RenderOptions.
    Malformed abbreviations and broken filter chains produce None, never a partial output.
    """

    def __init__(self, context = None, random = None, **options):
        """
        :param context: ExpansionContext with lookup tables; the built-in tables are used if None
        :param random: source of randomness for lorem text, see LoremGenerator
        :param options: rendering options, see RenderOptions.config_default
        """
        self.context = context if context is not None else ExpansionContext.default()
        self.options = RenderOptions(**options)
        self.parser  = MarkupParser(self.context)
        self.css     = CSSExpander(self.context, self.options.css_syntax)
        self.lorem   = LoremGenerator(random)

    def expand(self, abbr, extension = None):
        """
        Markup for an abbreviation, or None if the abbreviation is malformed or its filter chain is incorrect.
        :param extension: extension of the document being edited (html, haml, clj, ...);
                          selects default filters instead of options.dialect when known
        """
        try:
            node = self.parser.parse(abbr)
            pipeline = Pipeline(self.context, self.options, self.options.default_filters(extension), self.lorem)
            return pipeline(node)
        except ParseFailure as ex:
            logger.debug("abbreviation %r not expanded: %s", abbr, ex)
        except FilterError as ex:
            logger.debug("filters of %r failed: %s", abbr, ex)
        return None

    def expand_css(self, abbr):
        """CSS declarations for an abbreviation, or None if the abbreviation is malformed."""
        try:
            return self.css.expand(abbr)
        except ParseFailure as ex:
            logger.debug("CSS abbreviation %r not expanded: %s", abbr, ex)
            return None
