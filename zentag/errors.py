"""
Exceptions for Zentag.
"""

########################################################################################################################################################

class ZenError(Exception): pass

class ConfigError(ZenError): pass

class ConfigMissing(ConfigError):
    """A lookup table required by ExpansionContext was never supplied."""
    def __init__(self, table):
        ConfigError.__init__(self, f"lookup table '{table}' is missing from the expansion context")
        self.table = table

class FilterError(ZenError):
    """Unknown filter name in a |filter chain, or a filter applied to an input it can't process."""

########################################################################################################################################################

class ParseFailure(ZenError):
    """
    Malformed abbreviation. Carries a human-readable `label` of the construct that was expected,
    and the position `pos` in the input text where parsing got stuck (None if unknown).
    No partial output is ever produced for an abbreviation that raised ParseFailure.
    """
    label = None
    pos   = None
    text  = None

    def __init__(self, label, pos = None, text = None):
        self.label = label
        self.pos   = pos
        self.text  = text
        ZenError.__init__(self, self.make_msg(f"expected {label}"))

    def make_msg(self, msg):
        if self.pos is None: return msg
        if self.text is None: return msg + f" at column {self.pos}"
        return msg + f" at column {self.pos} ({self.text[self.pos:self.pos+10]!r})"
