"""
Zentag: expansion of CSS-selector-like abbreviations into markup (HTML, HAML, Hiccup) and CSS declarations.

    >>> from zentag import Expander
    >>> Expander().expand('div#page>p.note{Hi}')
    '<div id="page"><p class="note">Hi</p></div>'
"""

from zentag.errors import ZenError, ConfigError, ConfigMissing, FilterError, ParseFailure
from zentag.config import RenderOptions
from zentag.context import ExpansionContext
from zentag.parser import MarkupParser
from zentag.css import CSSExpander
from zentag.lorem import LoremGenerator
from zentag.expander import Expander
